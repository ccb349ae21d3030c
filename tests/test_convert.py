import logging
import shutil
from pathlib import Path

import pytest

from pseudoizer.convert import (
    convert_directory,
    convert_entries,
    convert_file,
    is_localized_name,
    localized_path,
)
from pseudoizer.pseudoize import pseudoize
from pseudoizer.resx import read_resx, write_resx

DATA = Path(__file__).parent / "data"

EXPECTED = [
    ("$this.Text", "[Ŧįŧľę !!! !!! !!! !!!]"),
    ("button1.Text", "[Ŝävę !!! !!! !!!]"),
    ("greeting", "[Ħęľľő !!! !!! !!! !!!]"),
    ("homepage", "https://example.com/start"),
    ("welcome", "[Ħęľľő {0}, vįşįŧ <b>ŉőŵ</b> !!! !!!]"),
]


def test_convert_file(tmp_path, caplog):
    out = tmp_path / "Form1.qps-ploc.resx"
    with caplog.at_level(logging.INFO):
        count = convert_file(DATA / "Form1.resx", out)

    assert count == 5
    assert read_resx(out) == EXPECTED
    assert "converted 5 text resource(s)." in caplog.text


def test_convert_file_with_blanks(tmp_path):
    out = tmp_path / "out.resx"
    assert convert_file(DATA / "Form1.resx", out, include_blank=True) == 6
    assert dict(read_resx(out))["empty"] == "[ !!! !!!]"


def test_round_trip_values_match_pseudoize(tmp_path):
    source = read_resx(DATA / "Form1.resx")
    out = tmp_path / "out.resx"
    convert_file(DATA / "Form1.resx", out)

    originals = dict(source)
    for key, value in read_resx(out):
        assert value == pseudoize(originals[key])


def test_malformed_source_is_skipped(tmp_path, caplog):
    out = tmp_path / "out.resx"
    with caplog.at_level(logging.WARNING):
        assert convert_file(DATA / "NotResx.resx", out) is None

    assert not out.exists()
    assert "could not parse" in caplog.text


def test_warnings_carry_no_level_prefix(tmp_path, caplog):
    with caplog.at_level(logging.WARNING):
        convert_file(DATA / "NotResx.resx", tmp_path / "out.resx")

    assert len(caplog.records) == 1
    record = caplog.records[0]
    assert record.levelname == "WARNING"
    assert not record.getMessage().startswith("WARNING")
    assert "unexpected root element <resources>" in record.getMessage()


def test_no_text_resources(tmp_path, caplog):
    source = tmp_path / "Images.resx"
    source.write_text(
        "<root><data name='logo' type='System.Drawing.Bitmap, System.Drawing'><value>AAAA</value></data>"
        "<data name='$this.Icon' type='System.Drawing.Icon, System.Drawing'><value>AAAA</value></data></root>"
    )
    out = tmp_path / "Images.fr.resx"

    with caplog.at_level(logging.WARNING):
        assert convert_file(source, out) == 0

    assert not out.exists()
    assert "No text resources found" in caplog.text


def test_missing_source_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        convert_file(tmp_path / "missing.resx", tmp_path / "out.resx")


def test_convert_entries_keeps_skips():
    result = convert_entries([("a", "Hi"), ("$b", "x")])
    assert result.converted == [("a", "[Ħį !!! !!!]")]
    assert result.skipped == [("$b", "reserved_key")]


@pytest.mark.parametrize("name,lang,expected", [
    ("Form1.resx", None, False),
    ("Form1.fr.resx", None, True),
    ("Form1.ja-JP.resx", None, True),
    ("Form1.zh-Hant-TW.resx", None, True),
    ("Form1.DE.resx", None, True),
    ("Form1.Designer.resx", None, False),
    ("Form1.qps-ploc.resx", None, False),
    ("Form1.qps-ploc.resx", "qps-ploc", True),
    ("Strings.fil-PH.resx", "ja-JP", True),
    ("Strings.haw-US.resx", "ja-JP", True),
    ("Strings.quz-PE.resx", "ja-JP", True),
    ("Strings.sah-RU.resx", "ja-JP", True),
    ("Strings.kok-IN.resx", "ja-JP", True),
    ("Strings.arn-CL.resx", "ja-JP", True),
])
def test_is_localized_name(name, lang, expected):
    assert is_localized_name(Path(name), lang) is expected


def test_localized_path():
    assert localized_path(Path("a/b/Strings.resx"), "ja-JP") == Path("a/b/Strings.ja-JP.resx")


def test_convert_directory(tmp_path):
    nested = tmp_path / "Forms" / "Dialogs"
    nested.mkdir(parents=True)
    shutil.copy(DATA / "Form1.resx", tmp_path / "Form1.resx")
    shutil.copy(DATA / "Form1.resx", nested / "About.resx")
    shutil.copy(DATA / "NotResx.resx", tmp_path / "Forms" / "Broken.resx")
    write_resx(tmp_path / "Form1.fr.resx", [("greeting", "Bonjour")])

    written = convert_directory(tmp_path, "ja-JP")

    assert sorted(written) == sorted([tmp_path / "Form1.ja-JP.resx", nested / "About.ja-JP.resx"])
    assert read_resx(nested / "About.ja-JP.resx") == EXPECTED
    assert not (tmp_path / "Form1.fr.ja-JP.resx").exists()
    assert not (tmp_path / "Forms" / "Broken.ja-JP.resx").exists()


def test_convert_directory_twice_does_not_stack(tmp_path):
    shutil.copy(DATA / "Form1.resx", tmp_path / "Form1.resx")

    convert_directory(tmp_path, "qps-ploc")
    written = convert_directory(tmp_path, "qps-ploc")

    assert written == [tmp_path / "Form1.qps-ploc.resx"]
    assert sorted(p.name for p in tmp_path.iterdir()) == ["Form1.qps-ploc.resx", "Form1.resx"]


def test_convert_directory_skips_three_letter_cultures(tmp_path):
    shutil.copy(DATA / "Form1.resx", tmp_path / "Strings.resx")
    shutil.copy(DATA / "Form1.resx", tmp_path / "Strings.fil-PH.resx")

    written = convert_directory(tmp_path, "ja-JP")

    assert written == [tmp_path / "Strings.ja-JP.resx"]
    assert not (tmp_path / "Strings.fil-PH.ja-JP.resx").exists()
