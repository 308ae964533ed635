from __future__ import annotations

import pytest

from tmplkit import render_template
from tmplkit.helpers import STRING_HELPERS, split_words
from tmplkit.helpers.strings import to_class_case, to_plural, to_singular, to_table_case

from conftest import assert_helpers


def test_chain_of_helpers_with_one_param(engine) -> None:
    tmpl = '{{ to_upper_case(to_singular("Hello foo-bars")) }}'
    assert render_template(engine, tmpl) == "BAR"


def test_chain_of_helpers_as_filters(engine) -> None:
    tmpl = '{{ "Hello foo-bars" | to_singular | to_upper_case }}'
    assert render_template(engine, tmpl) == "BAR"


def test_string_helpers(engine) -> None:
    assert_helpers(
        engine,
        "Hello foo-bars",
        [
            ("to_lower_case", "hello foo-bars"),
            ("to_upper_case", "HELLO FOO-BARS"),
            ("to_camel_case", "helloFooBars"),
            ("to_pascal_case", "HelloFooBars"),
            ("to_snake_case", "hello_foo_bars"),
            ("to_screaming_snake_case", "HELLO_FOO_BARS"),
            ("to_kebab_case", "hello-foo-bars"),
            ("to_train_case", "Hello-Foo-Bars"),
            ("to_sentence_case", "Hello foo bars"),
            ("to_title_case", "Hello Foo Bars"),
            ("to_class_case", "HelloFooBar"),
            ("to_table_case", "hello_foo_bars"),
            ("to_plural", "bars"),
            ("to_singular", "bar"),
        ],
    )


@pytest.mark.parametrize("name", sorted(STRING_HELPERS))
def test_string_helpers_accept_empty_input(name: str) -> None:
    assert STRING_HELPERS[name]("") == ""


def test_split_words_on_case_boundaries() -> None:
    assert split_words("HTTPServer") == ["HTTP", "Server"]
    assert split_words("fooBar_baz qux-1") == ["foo", "Bar", "baz", "qux", "1"]
    assert split_words("  --  ") == []


def test_camel_case_input_round_trips_through_snake(engine) -> None:
    assert_helpers(
        engine,
        "myHTTPServer",
        [
            ("to_snake_case", "my_http_server"),
            ("to_pascal_case", "MyHttpServer"),
            ("to_kebab_case", "my-http-server"),
        ],
    )


def test_inflection_uses_trailing_word() -> None:
    assert to_plural("a user") == "users"
    assert to_plural("category") == "categories"
    assert to_singular("categories") == "category"
    assert to_singular("foo_bars") == "foo_bar"
    # irregular forms come from the inflection tables
    assert to_plural("person") == "people"


def test_class_and_table_case() -> None:
    assert to_class_case("user_accounts") == "UserAccount"
    assert to_table_case("UserAccount") == "user_accounts"
