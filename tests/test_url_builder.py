from __future__ import annotations

import threading
from urllib.parse import parse_qsl, urlsplit

import pytest

from packages.imgix_urls import ConfigurationError, Param, URLBuilder, __version__


def _builder(**kwargs: object) -> URLBuilder:
    return URLBuilder("test.imgix.net", include_lib_param=False, **kwargs)


def test_default_builder() -> None:
    builder = URLBuilder("test.imgix.net")

    assert builder.use_https is True
    assert builder.scheme == "https"
    assert builder.include_lib_param is True
    assert builder.token is None


def test_basic_path_without_params() -> None:
    assert _builder().create_url("image.png") == "https://test.imgix.net/image.png"


def test_basic_path_with_params() -> None:
    url = _builder().create_url("image.png", Param("w", "100"))

    assert url == "https://test.imgix.net/image.png?w=100"


def test_readme_usage_with_params() -> None:
    builder = URLBuilder("demo.imgix.net", include_lib_param=False)

    url = builder.create_url("path/to/image.jpg", Param("w", "320"), Param("auto", "format", "compress"))

    assert url == "https://demo.imgix.net/path/to/image.jpg?auto=format%2Ccompress&w=320"


def test_paths_are_plus_safe() -> None:
    url = _builder().create_url("E+P-003_D.jpeg")

    assert url == "https://test.imgix.net/E%2BP-003_D.jpeg"
    assert " " not in url


def test_empty_path_with_repeated_values() -> None:
    url = _builder().create_url("", Param("auto", "format", "compress"))

    assert url == "https://test.imgix.net?auto=format%2Ccompress"


def test_base64_param_with_unicode() -> None:
    url = _builder().create_url("~text", Param("txt64", "I cannøt belîév∑ it wors! 😱"))

    assert url == "https://test.imgix.net/~text?txt64=SSBjYW5uw7h0IGJlbMOuw6l24oiRIGl0IHdvcu-jv3MhIPCfmLE"


def test_lib_param_is_included_by_default() -> None:
    url = URLBuilder("test.imgix.net").create_url("image.png", Param("w", 100))

    assert url == f"https://test.imgix.net/image.png?ixlib=python-{__version__}&w=100"


def test_http_scheme() -> None:
    builder = _builder(use_https=False)

    assert builder.scheme == "http"
    assert builder.create_url("image.png") == "http://test.imgix.net/image.png"


def test_signed_url_without_params() -> None:
    builder = URLBuilder("demo.imgix.net", token="MYT0KEN", include_lib_param=False)

    url = builder.create_url("path/to/image.jpg")

    assert url == "https://demo.imgix.net/path/to/image.jpg?s=c8bd1807209f7f1d96dd7123f92febb4"


def test_signed_blueprint_proxy_path() -> None:
    builder = URLBuilder("my-social-network.imgix.net", token="FOO123bar", include_lib_param=False)

    url = builder.create_url("/http%3A%2F%2Favatars.com%2Fjohn-smith.png")

    assert url == (
        "https://my-social-network.imgix.net/http%3A%2F%2Favatars.com%2Fjohn-smith.png"
        "?s=493a52f008c91416351f8b33d4883135"
    )


def test_signed_blueprint_with_params_ignores_leading_slash() -> None:
    builder = URLBuilder("my-social-network.imgix.net", token="FOO123bar", include_lib_param=False)
    params = (Param("h", "300"), Param("w", "400"))
    expected = "https://my-social-network.imgix.net/users/1.png?h=300&w=400&s=1a4e48641614d1109c6a7af51be23d18"

    assert builder.create_url("/users/1.png", *params) == expected
    assert builder.create_url("users/1.png", *params) == expected


def test_signed_proxy_path_with_params() -> None:
    builder = URLBuilder("my-social-network.imgix.net", token="FOO123bar", include_lib_param=False)

    url = builder.create_url(
        "/http%3A%2F%2Favatars.com%2Fjohn-smith.png", Param("w", "400"), Param("h", "300")
    )

    assert url == (
        "https://my-social-network.imgix.net/http%3A%2F%2Favatars.com%2Fjohn-smith.png"
        "?h=300&w=400&s=a201fe1a3caef4944dcb40f6ce99e746"
    )


def test_signature_is_last_and_keys_are_sorted() -> None:
    builder = URLBuilder("demo.imgix.net", token="MYT0KEN")

    url = builder.create_url("a.jpg", Param("w", 1), Param("blur", 20), Param("fit", "crop"))
    keys = [key for key, _ in parse_qsl(urlsplit(url).query)]

    assert keys[-1] == "s"
    assert keys[:-1] == sorted(keys[:-1])
    assert keys[:-1] == ["blur", "fit", "ixlib", "w"]


def test_adding_a_param_changes_the_signature() -> None:
    builder = URLBuilder("demo.imgix.net", token="MYT0KEN", include_lib_param=False)

    bare = builder.create_url("path/to/image.jpg")
    with_width = builder.create_url("path/to/image.jpg", Param("w", 100))

    assert bare.rsplit("s=", 1)[1] != with_width.rsplit("s=", 1)[1]
    assert with_width.split("?", 1)[1].startswith("w=100&s=")


def test_create_url_is_deterministic() -> None:
    builder = URLBuilder("demo.imgix.net", token="MYT0KEN")
    params = (Param("w", 320), Param("txt64", "hello world"))

    assert builder.create_url("x/y.png", *params) == builder.create_url("x/y.png", *params)


def test_copies_leave_original_untouched() -> None:
    original = URLBuilder("demo.imgix.net")

    signed = original.with_token("MYT0KEN").with_lib_param(False).with_scheme("http")

    assert original.token is None
    assert original.include_lib_param is True
    assert original.scheme == "https"
    assert signed.create_url("path/to/image.jpg") == (
        "http://demo.imgix.net/path/to/image.jpg?s=c8bd1807209f7f1d96dd7123f92febb4"
    )


def test_builder_is_frozen() -> None:
    builder = URLBuilder("demo.imgix.net")

    with pytest.raises(AttributeError):
        builder.token = "nope"  # type: ignore[misc]


def test_token_is_not_in_repr() -> None:
    assert "MYT0KEN" not in repr(URLBuilder("demo.imgix.net", token="MYT0KEN"))


def test_concurrent_use_is_consistent() -> None:
    builder = URLBuilder("demo.imgix.net", token="MYT0KEN")
    expected = builder.create_url("a.png", Param("w", 10))
    results: list[str] = []

    def work() -> None:
        for _ in range(50):
            results.append(builder.create_url("a.png", Param("w", 10)))

    threads = [threading.Thread(target=work) for _ in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert set(results) == {expected}


@pytest.mark.parametrize(
    "domain",
    ["", "   ", "https://demo.imgix.net", "demo.imgix.net/path", "demo imgix.net", "demo.imgix.net:443"],
)
def test_invalid_domain_is_a_configuration_error(domain: str) -> None:
    with pytest.raises(ConfigurationError):
        URLBuilder(domain)


def test_invalid_srcset_defaults_are_a_configuration_error() -> None:
    with pytest.raises(ConfigurationError):
        URLBuilder("demo.imgix.net", min_width=900, max_width=100)
    with pytest.raises(ConfigurationError):
        URLBuilder("demo.imgix.net").with_srcset_defaults(tolerance=1.5)


def test_invalid_scheme_is_a_configuration_error() -> None:
    with pytest.raises(ConfigurationError):
        URLBuilder("demo.imgix.net").with_scheme("ftp")
