"""Tests for FeedbackService."""
from scoreboard.data_models.period import Period
from scoreboard.services.feedback import FeedbackService
from tests.conftest import FRIDAY, MONDAY, THURSDAY, TUESDAY, make_submission


class TestSummarize:

    def setup_method(self):
        self.service = FeedbackService()
        self.period = Period(FRIDAY, THURSDAY)

    def test_kpis_and_rows(self):
        submissions = [
            make_submission("alice", FRIDAY, 4, 3, statics=2),
            make_submission("alice", MONDAY, 3, 3, statics=1, video_durations=(30,)),
            make_submission("alice", TUESDAY, statics=0, video_durations=(None,)),
            make_submission("bob", MONDAY, 5, 5),
        ]
        summary = self.service.summarize("alice", self.period, submissions)

        assert summary.total_submissions == 3
        assert summary.statics == 3
        assert summary.videos == 2
        assert summary.weighted_count == 7.0
        assert summary.avg_productivity == 3.5
        assert summary.avg_quality == 3.0
        assert summary.avg_total == 6.5
        assert summary.has_ratings

        assert [row.submission_date for row in summary.rows] == [TUESDAY, MONDAY, FRIDAY]
        assert summary.rows[0].total_score is None
        assert summary.rows[2].total_score == 7

    def test_averages_round_to_two_places(self):
        submissions = [
            make_submission("alice", FRIDAY, 4, 4),
            make_submission("alice", MONDAY, 4, 5),
            make_submission("alice", TUESDAY, 5, 5),
        ]
        summary = self.service.summarize("alice", self.period, submissions)
        assert summary.avg_productivity == 4.33
        assert summary.avg_quality == 4.67
        assert summary.avg_total == 9.0

    def test_no_ratings(self):
        summary = self.service.summarize("alice", self.period, [make_submission("alice", MONDAY)])
        assert summary.avg_total == 0
        assert not summary.has_ratings

    def test_outside_period_ignored(self):
        summary = self.service.summarize(
            "alice", Period(MONDAY, MONDAY), [make_submission("alice", FRIDAY, 5, 5)]
        )
        assert summary.total_submissions == 0
        assert summary.rows == []


def test_daily_submission_counts():
    submissions = [
        make_submission("alice", MONDAY),
        make_submission("bob", FRIDAY),
        make_submission("carol", MONDAY),
    ]
    assert FeedbackService.daily_submission_counts(submissions) == [(FRIDAY, 1), (MONDAY, 2)]
