from tradeval.ingest import load_roster
from tradeval.report import format_positions, format_salary, render_trade_report
from tradeval.trade import TradeEvaluation, aggregate_group, compare_groups


def _evaluation(sample_roster_text: str, team_c=None) -> TradeEvaluation:
    index = load_roster(sample_roster_text).index
    team_a = aggregate_group(["Connor McDavid", "Cale Makar"], index, label="A")
    team_b = aggregate_group(["Mitch Marner", "Tage Thompson"], index, label="B")
    group_c = aggregate_group(team_c, index, label="C") if team_c else None
    return TradeEvaluation(
        team_a=team_a,
        team_b=team_b,
        team_c=group_c,
        verdict=compare_groups(team_a, team_b, group_c),
    )


def test_report_matches_displayed_figures(sample_roster_text: str):
    report = render_trade_report(_evaluation(sample_roster_text))

    assert report.startswith("Trade Analysis Report\n=====================\n")
    assert "Team A (2 players)" in report
    assert "Players: Connor McDavid, Cale Makar" in report
    assert "Total Score: 185.00" in report
    assert "TA Score: 2.50" in report
    assert "TA Score: -2.50" in report
    assert "Total Salary: $21,500,000" in report
    assert "Average Age: 26.5" in report
    assert "Average Age: 27.0" in report
    assert "Positions: RW: 2, C: 1" in report
    assert "Goals: 53" in report
    assert "Shots on Goal: 550" in report
    assert "Team A wins the trade" in report
    assert "Net Score Impact (A - B): +50.00" in report
    assert "TA Score Gap (A - B): +5.00" in report
    assert "Team C" not in report


def test_report_includes_third_group(sample_roster_text: str):
    report = render_trade_report(_evaluation(sample_roster_text, team_c=["Jack Hughes"]))

    assert "Team C (1 player)" in report
    assert "Team C: not the best value" in report


def test_formatters():
    assert format_salary(1234567.4) == "$1,234,567"
    assert format_positions({}) == "-"
    assert format_positions({"C": 2, "D": 1}) == "C: 2, D: 1"
