from hilo.higher_lower.higher_lower import main, parse_args


def test_parse_args_defaults():
    args = parse_args([])
    assert args.simulate is None
    assert args.strategy == "best-odds"
    assert args.seed is None
    assert args.transcript is None
    assert args.verbose is False


def test_simulate_command(capsys):
    assert main(["--simulate", "5", "--seed", "1", "--strategy", "all-in"]) == 0

    out = capsys.readouterr().out
    assert "Finished simulating 5 games with 'all-in'." in out
    assert "Bust rate:" in out


def test_simulate_needs_a_game(capsys):
    assert main(["--simulate", "0"]) == 2
    assert "at least one game" in capsys.readouterr().err
