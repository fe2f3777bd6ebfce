"""
End-to-end tests of the ``monty-hall-sim`` command through click's test runner.
"""

import re

from click.testing import CliRunner

from monty_hall_sim.cli import main

SUMMARY = re.compile(r"^Simulations: (\d+), Wins: (\d+), Win Ratio: (\d\.\d{2})$")


def invoke(*args):
    return CliRunner().invoke(main, list(args))


class TestSuccess:

    def test_prints_headline_and_summary_per_strategy(self):
        result = invoke("--simulations", "200")

        assert result.exit_code == 0, result.output
        lines = result.stdout.splitlines()
        assert lines[0] == "Running simulation where the player does not change the door:"
        assert lines[2] == "Running simulation where the player changes the door:"
        for line in (lines[1], lines[3]):
            match = SUMMARY.match(line)
            assert match and match.group(1) == "200"
        assert len(lines) == 4

    def test_verbose_prints_traces(self):
        result = invoke("--simulations", "1", "--verbose")

        assert result.exit_code == 0, result.output
        assert "Car is at door" in result.stdout
        assert "Player chooses door" in result.stdout
        assert "Player changes choice to door" in result.stdout
        assert re.search(r"^Trial\s+1 \| (WIN|LOSE)$", result.stdout, re.MULTILINE)


class TestInvalidArguments:

    def test_zero_simulations(self):
        result = invoke("--simulations", "0")

        assert result.exit_code == 2
        assert result.stdout == ""
        assert "Usage:" in result.stderr
        assert "trial_count must be positive" in result.stderr

    def test_non_integer_simulations(self):
        result = invoke("--simulations", "many")
        assert result.exit_code == 2
        assert "Usage:" in result.stderr

    def test_unknown_option(self):
        result = invoke("--doors", "4")
        assert result.exit_code == 2
        assert "No such option" in result.stderr

    def test_unexpected_argument(self):
        result = invoke("extra")
        assert result.exit_code == 2
        assert result.stdout == ""
