import io

import pytest

from algokit.convert import MILLIMETERS_PER_FOOT, feet_to_millimeters, main


def test_one_foot_uses_source_constant():
    assert feet_to_millimeters(1) == 384.9


def test_zero_feet():
    assert feet_to_millimeters(0) == 0


def test_conversion_is_linear():
    assert feet_to_millimeters(7) == pytest.approx(7 * MILLIMETERS_PER_FOOT)
    assert feet_to_millimeters(-2) == pytest.approx(-feet_to_millimeters(2))


def test_main_with_argument(capsys):
    assert main(["1"]) == 0
    out = capsys.readouterr().out
    assert "Konversi Kaki (ft) ke Milimeter (mm)" in out
    assert "Hasil = 384.9 mm" in out


def test_main_reads_stdin(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Masukan satuan kaki (ft) : " in out
    assert "Hasil = 384.9 mm" in out


def test_main_rejects_non_integer():
    with pytest.raises(SystemExit) as excinfo:
        main(["abc"])
    assert excinfo.value.code == 2