# file: tests/test_options.py
from __future__ import annotations

import pytest

from phonemetagen.core.options import Options, UsageError, is_valid_constant_name
from phonemetagen.core.types import MetadataType
from phonemetagen.core.variant import Variant

IGNORED = "IGNORED"
OUTPUT_DIR = "output/dir"
INPUT_PATH_XML = "input/path.xml"


def test_parse_bad_options_names_command() -> None:
    with pytest.raises(UsageError) as excinfo:
        Options.parse("MyCommand", [IGNORED])
    message = str(excinfo.value)
    assert "MyCommand" in message
    for name in ("metadata", "alternate_format", "short_numbers"):
        assert name in message


def test_parse_good_options_with_equals_flag() -> None:
    opt = Options.parse(
        "MyCommand",
        [IGNORED, INPUT_PATH_XML, OUTPUT_DIR, "test_alternate_format", "--const-name=METADATA"],
    )
    assert opt.type is MetadataType.ALTERNATE_FORMAT
    assert opt.variant is Variant.TEST
    assert opt.input_path == INPUT_PATH_XML
    assert opt.output_dir == OUTPUT_DIR
    assert opt.constant_name == "METADATA"


def test_parse_flag_with_space_and_any_position() -> None:
    opt = Options.parse(
        "MyCommand",
        [IGNORED, "--const-name TEST_METADATA", INPUT_PATH_XML, OUTPUT_DIR, "lite_short_numbers"],
    )
    assert opt.constant_name == "TEST_METADATA"
    assert opt.type is MetadataType.SHORT_NUMBERS
    assert opt.variant is Variant.LITE
    assert opt.input_path == INPUT_PATH_XML


def test_parse_four_tokens_defaults() -> None:
    opt = Options.parse("MyCommand", [IGNORED, INPUT_PATH_XML, OUTPUT_DIR, "metadata"])
    assert opt.type is MetadataType.METADATA
    assert opt.variant is Variant.FULL
    assert opt.constant_name == "METADATA"


@pytest.mark.parametrize(
    "args",
    [
        [],
        [IGNORED, INPUT_PATH_XML, OUTPUT_DIR],
        [IGNORED, INPUT_PATH_XML, OUTPUT_DIR, "xxx"],
        [IGNORED, INPUT_PATH_XML, OUTPUT_DIR, "metadata", "extra"],
        [IGNORED, INPUT_PATH_XML, OUTPUT_DIR, "metadata", "--const-name=1BAD"],
        [IGNORED, INPUT_PATH_XML, OUTPUT_DIR, "metadata", "--const-name=fn"],
        [IGNORED, INPUT_PATH_XML, OUTPUT_DIR, "metadata", "--const-name=A", "--const-name=B"],
        [IGNORED, INPUT_PATH_XML, OUTPUT_DIR, "metadata", "--const-name", "METADATA"],
    ],
)
def test_parse_rejects_bad_shapes(args: list[str]) -> None:
    with pytest.raises(UsageError, match="MyCommand"):
        Options.parse("MyCommand", args)


def test_options_are_immutable() -> None:
    opt = Options.parse("MyCommand", [IGNORED, INPUT_PATH_XML, OUTPUT_DIR, "metadata"])
    with pytest.raises(AttributeError):
        opt.constant_name = "OTHER"  # type: ignore[misc]


def test_constant_name_grammar() -> None:
    assert is_valid_constant_name("METADATA")
    assert is_valid_constant_name("TEST_METADATA_2")
    assert is_valid_constant_name("_PRIVATE")
    assert not is_valid_constant_name("_")
    assert not is_valid_constant_name("2X")
    assert not is_valid_constant_name("A-B")
    assert not is_valid_constant_name("static")
    assert not is_valid_constant_name("")
