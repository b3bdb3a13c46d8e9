"""Tests for struct extraction."""

from __future__ import annotations

import pytest

from cfgdoc.errors import DuplicateTypeError, UnsupportedTypeShapeError
from tests._fixtures.go_tree import GoTreeBuilder


def test_undocumented_fields_are_excluded(go_tree: GoTreeBuilder) -> None:
    go_tree.write(
        {
            "config.go": """
            package config

            // Example config.
            type Example struct {
            \t// Default: 8080
            \t// The listen port.
            \tPort int
            \tHidden string
            }
            """
        }
    )

    result = go_tree.extract()
    example = result.get("Example")

    assert example is not None
    assert example.doc == "Example config.\n"
    assert example.source == "config.go"
    assert len(example.fields) == 1
    (port,) = example.fields
    assert port.name == "Port"
    assert port.type_signature == "int"
    assert port.default_value == "8080"
    assert port.doc == "Default: 8080\nThe listen port.\n"
    assert all(field.doc for field in example.fields)


def test_embedded_member_carries_composite(go_tree: GoTreeBuilder) -> None:
    go_tree.write(
        {
            "config.go": """
            package config

            type SiteConfig struct {
            \t// Base settings shared by every site
            \tBase

            \t// Name of the site
            \tSiteName string
            }
            """
        }
    )

    site = go_tree.extract().types["SiteConfig"]

    embedded, named = site.fields
    assert embedded.name == ""
    assert embedded.composite == "Base"
    assert embedded.embedded
    assert named.name == "SiteName"
    assert named.composite == ""


def test_field_shapes_are_rendered(go_tree: GoTreeBuilder) -> None:
    go_tree.write(
        {
            "config.go": """
            package config

            type PostConfig struct {
            \t// Flags to show
            \tCustomFlags []geoip.Country
            \t// Words to filter
            \tWordFilters map[string]string
            \t// Optional banner
            \tBanner *PageBanner
            \t// Names share a doc, the first one is used
            \tFirst, Second bool
            }
            """
        }
    )

    fields = go_tree.extract().types["PostConfig"].fields

    assert [(field.name, field.type_signature) for field in fields] == [
        ("CustomFlags", "[]geoip.Country"),
        ("WordFilters", "map[string]string"),
        ("Banner", "PageBanner"),
        ("First", "bool"),
    ]


def test_grouped_type_declarations_use_their_own_comments(go_tree: GoTreeBuilder) -> None:
    go_tree.write(
        {
            "config.go": """
            package config

            type (
            \t// PageBanner is a banner image
            \tPageBanner struct {
            \t\t// Filename of the banner
            \t\tFilename string
            \t}

            \t// BoardCooldowns sets post cooldowns
            \tBoardCooldowns struct {
            \t\t// Seconds between threads
            \t\tNewThread int
            \t}
            )
            """
        }
    )

    result = go_tree.extract()

    assert result.types["PageBanner"].doc == "PageBanner is a banner image\n"
    assert result.types["BoardCooldowns"].doc == "BoardCooldowns sets post cooldowns\n"


def test_comment_after_opening_brace_is_not_a_field_doc(go_tree: GoTreeBuilder) -> None:
    go_tree.write(
        {
            "config.go": """
            package config

            type Example struct { // trailing on brace line
            \tFoo int
            \t// Bar is documented
            \tBar string
            }
            """
        }
    )

    example = go_tree.extract().types["Example"]

    assert [field.name for field in example.fields] == ["Bar"]
    assert example.fields[0].doc == "Bar is documented\n"


def test_comment_after_opening_brace_keeps_following_field_doc(go_tree: GoTreeBuilder) -> None:
    go_tree.write(
        {
            "config.go": """
            package config

            type Example struct { // trailing on brace line
            \t// Foo is documented
            \tFoo int
            }
            """
        }
    )

    (foo,) = go_tree.extract().types["Example"].fields

    assert foo.doc == "Foo is documented\n"


def test_comment_after_opening_paren_is_not_a_type_doc(go_tree: GoTreeBuilder) -> None:
    go_tree.write(
        {
            "config.go": """
            package config

            type ( // group note
            \tY struct {
            \t\t// Value of Y
            \t\tValue int
            \t}
            )
            """
        }
    )

    y = go_tree.extract().types["Y"]

    assert y.doc == ""
    assert [field.name for field in y.fields] == ["Value"]


def test_type_doc_falls_back_to_probable_name(go_tree: GoTreeBuilder) -> None:
    go_tree.write(
        {
            "config.go": """
            package config

            // CaptchaConfig holds the captcha settings, see the constants below
            const (
            \tCaptchaNone = iota
            \tCaptchaHCaptcha
            )

            type CaptchaConfig struct {
            \t// Captcha provider
            \tType string
            }

            // Documented directly
            type Other struct {
            \t// A field
            \tValue int
            }
            """
        }
    )

    result = go_tree.extract()

    assert result.types["CaptchaConfig"].doc == (
        "CaptchaConfig holds the captcha settings, see the constants below\n"
    )
    assert result.types["Other"].doc == "Documented directly\n"


def test_probable_names_do_not_cross_files(go_tree: GoTreeBuilder) -> None:
    go_tree.write(
        {
            "a.go": """
            package config

            // Mode selects the runtime mode
            var (
            \tModeDefault = "default"
            )
            """,
            "b.go": """
            package config

            type Mode struct {
            \t// Mode name
            \tName string
            }
            """,
        }
    )

    assert go_tree.extract().types["Mode"].doc == ""


def test_struct_literal_body_replaces_declaration(go_tree: GoTreeBuilder) -> None:
    go_tree.write(
        {
            "config.go": """
            package config

            type Settings struct {
            \t// Old field
            \tOld int
            }

            var defaults = struct {
            \t// New field
            \tNew string
            }{}
            """
        }
    )

    result = go_tree.extract()

    assert [field.name for field in result.types["Settings"].fields] == ["New"]
    assert result.collisions == []


def test_nested_anonymous_struct_does_not_replace_owner(go_tree: GoTreeBuilder) -> None:
    go_tree.write(
        {
            "config.go": """
            package config

            type Outer struct {
            \t// Documented
            \tName string
            \tInner struct {
            \t\t// Nested
            \t\tValue int
            \t}
            }
            """
        }
    )

    assert [field.name for field in go_tree.extract().types["Outer"].fields] == ["Name"]


def test_cross_file_collisions_are_reported(go_tree: GoTreeBuilder) -> None:
    files = {
        "a.go": """
        package config

        type Dup struct {
        \t// From a
        \tA int
        }
        """,
        "b.go": """
        package config

        type Dup struct {
        \t// From b
        \tB int
        }
        """,
    }
    go_tree.write(files)

    result = go_tree.extract()

    assert [field.name for field in result.types["Dup"].fields] == ["B"]
    assert len(result.collisions) == 1
    collision = result.collisions[0]
    assert (collision.name, collision.first_source, collision.second_source) == ("Dup", "a.go", "b.go")

    with pytest.raises(DuplicateTypeError):
        go_tree.extract(strict=True)


def test_unsupported_documented_field_is_an_error(go_tree: GoTreeBuilder) -> None:
    go_tree.write(
        {
            "config.go": """
            package config

            type Worker struct {
            \t// Jobs to run
            \tJobs chan int
            \t// Worker name
            \tName string
            \tundocumented func()
            }
            """
        }
    )

    with pytest.raises(UnsupportedTypeShapeError) as excinfo:
        go_tree.extract()
    assert excinfo.value.path == "config.go"
    assert excinfo.value.row == 4

    worker = go_tree.extract(on_unsupported="skip").types["Worker"]
    assert [field.name for field in worker.fields] == ["Name"]


def test_unknown_unsupported_mode_is_rejected(go_tree: GoTreeBuilder) -> None:
    with pytest.raises(ValueError):
        go_tree.extract(on_unsupported="ignore")
