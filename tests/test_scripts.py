import importlib.util
from pathlib import Path

SCRIPT = Path(__file__).resolve().parents[1] / "scripts" / "print_fallback_returns.py"


def _load_script():
    spec = importlib.util.spec_from_file_location("print_fallback_returns", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_parser_has_description_and_defaults():
    parser = _load_script().build_parser()

    assert parser.description
    assert "fallback price table" in parser.description

    args = parser.parse_args(["--currency", "INR", "--current-price", "5000000"])
    assert args.currency == "INR"
    assert args.current_price == 5000000.0
    assert args.amount == 10000.0


def test_print_returns_lists_every_table_year(capsys):
    _load_script().print_returns(10000, "USD", 60000.0)

    out = capsys.readouterr().out
    assert "approximate prices" in out
    assert "2010" in out and "2024" in out
    assert "$13,880.00" in out
