from oaicli import utils


def test_project_root():
    assert (utils.project_root() / 'pyproject.toml').exists()


def test_shorten():
    assert utils.shorten('short') == 'short'
    assert utils.shorten('a  multi\nline   text') == 'a multi line text'
    assert utils.shorten('abcdefghij', width=8) == 'abcde...'
