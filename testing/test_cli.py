import argparse

import pytest
import numpy as np

from kleinian_tools import cli

def test_parse_complex():
    assert cli.parse_complex("2") == 2 + 0j
    assert cli.parse_complex("1.5+1j") == 1.5 + 1j
    assert cli.parse_complex("1.5 + 1j") == 1.5 + 1j
    with pytest.raises(argparse.ArgumentTypeError):
        cli.parse_complex("two")

def test_presets():
    assert cli.PRESETS["apollonian"] == (2 + 0j, 2 + 0j)
    ta, tb = cli.PRESETS["sqrt3"]
    assert np.isclose(ta, np.sqrt(3) + 1j)
    assert tb == 2

def test_defaults():
    args = cli.build_parser().parse_args([])
    assert args.level == 50
    assert args.epsilon == 1e-3
    assert args.output == "image.svg"
    assert args.ta is None and args.tb is None

def test_main_svg(tmp_path):
    filename = tmp_path / "gasket.svg"
    assert cli.main(["--level", "4", "-o", str(filename)]) == 0
    text = filename.read_text(encoding="utf-8")
    assert text.count("<path") == 1
    assert "M1.0,0.0" in text

def test_main_png(tmp_path):
    filename = tmp_path / "gasket.png"
    status = cli.main(["--preset", "sqrt3", "--level", "4",
                       "-o", str(filename)])
    assert status == 0
    assert filename.exists()

def test_main_degenerate(tmp_path):
    filename = tmp_path / "broken.svg"
    assert cli.main(["--ta", "0", "--tb", "0", "-o", str(filename)]) == 1
    assert not filename.exists()

def test_bad_arguments():
    with pytest.raises(SystemExit):
        cli.main(["--ta", "nonsense"])
    with pytest.raises(SystemExit):
        cli.main(["--level", "0"])
    with pytest.raises(SystemExit):
        cli.main(["--epsilon", "-1"])
