from pathlib import Path

from utf8slice.parameters import ParameterError, Parameters
from utf8slice.scripts import slice_text

from pytest import raises

TEXT = "The \U0001F680 goes to the \U0001F311!"


def _write_input(tmp_path: Path) -> Path:
    input_file = tmp_path / "input.txt"
    input_file.write_bytes(TEXT.encode("utf-8"))
    return input_file


def test_slice_text_to_file(tmp_path: Path):
    output = tmp_path / "out" / "slice.txt"
    slice_text.main(
        Parameters.from_mapping(
            {
                "input_file": str(_write_input(tmp_path)),
                "begin": 4,
                "end": 11,
                "output_file": str(output),
            }
        )
    )
    assert output.read_bytes() == "\U0001F680 goes ".encode("utf-8")


def test_slice_text_defaults_to_whole_text(tmp_path: Path):
    output = tmp_path / "slice.txt"
    slice_text.main(
        Parameters.from_mapping(
            {"input_file": str(_write_input(tmp_path)), "output_file": str(output)}
        )
    )
    assert output.read_text(encoding="utf-8") == TEXT


def test_slice_text_out_of_range_is_empty(tmp_path: Path, caplog):
    output = tmp_path / "slice.txt"
    slice_text.main(
        Parameters.from_mapping(
            {
                "input_file": str(_write_input(tmp_path)),
                "begin": 50,
                "output_file": str(output),
            }
        )
    )
    assert output.read_bytes() == b""
    assert "out of bounds" in caplog.text


def test_slice_text_to_stdout(tmp_path: Path, capfdbinary):
    slice_text.main(
        Parameters.from_mapping(
            {"input_file": str(_write_input(tmp_path)), "begin": 18, "end": 20}
        )
    )
    assert capfdbinary.readouterr().out == "\U0001F311!".encode("utf-8")


def test_slice_text_rejects_negative_positions(tmp_path: Path):
    with raises(ParameterError, match="begin to be a non-negative integer"):
        slice_text.main(
            Parameters.from_mapping(
                {"input_file": str(_write_input(tmp_path)), "begin": -1}
            )
        )
