from oaicli.errors import AppError


def test_app_error():
    error = AppError('Something went wrong')
    assert error.description == 'Something went wrong'
    assert str(error) == 'Something went wrong'
    assert error.exit_code == 1
