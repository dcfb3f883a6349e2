"""Integration tests for the full pipeline.

These run the packaged threshold table through the loader, the web app
and the CLI, and check they agree.
"""

from click.testing import CliRunner

from strength_level.cli import main
from strength_level.data.threshold_loader import load_threshold_table
from strength_level.models.strength import EXERCISES, FREAK, UNTRAINED, Sex
from strength_level.services.classifier import classify


class TestPipelineIntegration:
    """Integration tests across loader, web app and CLI."""

    def test_every_tier_reachable(self):
        """Test each packaged tier is produced by a ratio on its threshold."""
        table = load_threshold_table()

        for exercise in EXERCISES:
            for sex in Sex:
                levels = table.sorted_levels(exercise, sex)
                # Body weight of 1 makes the lift equal to the ratio
                for name, threshold in levels[:-1]:
                    assert classify(table, sex, exercise, 1, threshold) == name
                top_name, top = levels[-1]
                assert classify(table, sex, exercise, 1, top - 0.01) == top_name
                assert classify(table, sex, exercise, 1, top) == FREAK
                assert classify(table, sex, exercise, 1, levels[0][1] / 2) == UNTRAINED

    def test_web_and_cli_agree(self, packaged_client):
        """Test the JSON API and CLI give the same labels."""
        lifts = {"Squat": 275, "Bench": 185, "Deadlift": 365}

        api = packaged_client.post(
            "/api/classify", json={"sex": "M", "body_weight": 180, "one_rep_max": lifts}
        ).json()["results"]

        result = CliRunner().invoke(
            main,
            ["classify", "-w", "180", "--squat", "275", "--bench", "185", "--deadlift", "365"],
        )
        cli = dict(line.split() for line in result.output.splitlines()[2:])

        assert result.exit_code == 0
        assert cli == api

    def test_form_round_trip(self, packaged_client):
        """Test the HTML form renders a result for each lift."""
        response = packaged_client.post(
            "/",
            data={"sex": "F", "body_weight": "140", "squat": "185", "bench": "95", "deadlift": "225"},
        )

        assert response.status_code == 200
        for exercise in EXERCISES:
            assert f"<strong>{exercise}:</strong>" in response.text
