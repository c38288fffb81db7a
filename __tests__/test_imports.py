import co2x


def test_version_export() -> None:
    assert hasattr(co2x, "__version__")
    assert isinstance(co2x.__version__, str)


def test_app_exports() -> None:
    assert callable(co2x.create_app)
    assert hasattr(co2x, "AppSettings")


def test_provider_exports() -> None:
    assert hasattr(co2x, "LineOAuthProvider")
    assert hasattr(co2x, "LineTokenResponse")
    assert hasattr(co2x, "LineUserProfile")


def test_session_exports() -> None:
    assert hasattr(co2x, "AuthSession")
    assert hasattr(co2x, "LineLoginClient")
    assert hasattr(co2x, "SessionStore")


def test_exception_exports() -> None:
    for name in (
        "Co2xError",
        "MissingCodeError",
        "MissingAuthHeaderError",
        "TokenExchangeError",
        "ProfileFetchError",
        "CsrfMismatchError",
    ):
        assert hasattr(co2x, name)


def test_all_is_consistent() -> None:
    for name in co2x.__all__:
        assert hasattr(co2x, name)
