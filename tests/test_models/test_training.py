"""Tests for Training enrollment, aggregation and level computation."""

from __future__ import annotations

import logging

import pytest

from training_catalog.exceptions import DivisionByZeroError, EmptyCollectionError
from training_catalog.models.activity import Activity, User
from training_catalog.models.educational_content import EducationalContent
from training_catalog.models.enums import ActivityType, Level
from training_catalog.models.training import Training


def _make_training(*contents: EducationalContent) -> Training:
    return Training(name="Formação", contents=contents, description="Descrição")


class TestEnrollment:
    def test_starts_empty(self, kotlin_training: Training) -> None:
        assert kotlin_training.number_of_enrolled() == 0
        assert kotlin_training.enrolled_users() == ()

    def test_preserves_order(self, kotlin_training: Training, users) -> None:
        kotlin_training.enroll(users)
        assert kotlin_training.number_of_enrolled() == 3
        assert [u.name for u in kotlin_training.enrolled_users()] == ["Asafe", "Alves", "Lopes"]

    def test_successive_calls_append(self, kotlin_training: Training) -> None:
        kotlin_training.enroll([User("A")])
        kotlin_training.enroll([User("B"), User("C")])
        assert [u.name for u in kotlin_training.enrolled_users()] == ["A", "B", "C"]

    def test_duplicates_kept(self, kotlin_training: Training) -> None:
        kotlin_training.enroll([User("A"), User("A")])
        assert kotlin_training.number_of_enrolled() == 2

    def test_accepts_generator(self, kotlin_training: Training) -> None:
        kotlin_training.enroll(User(name) for name in ("A", "B"))
        assert kotlin_training.number_of_enrolled() == 2

    def test_returns_none(self, kotlin_training: Training) -> None:
        assert kotlin_training.enroll([User("A")]) is None

    def test_snapshot_not_live(self, kotlin_training: Training) -> None:
        snapshot = kotlin_training.enrolled_users()
        kotlin_training.enroll([User("A")])
        assert snapshot == ()

    def test_enrollment_logged_at_debug(self, kotlin_training: Training, caplog) -> None:
        with caplog.at_level(logging.DEBUG, logger="training_catalog.models.training"):
            kotlin_training.enroll([User("Asafe")])
        assert "Enrolled Asafe" in caplog.text


class TestAggregates:
    def test_kotlin_duration(self, kotlin_training: Training) -> None:
        assert kotlin_training.training_duration() == 360 + 900 + 900

    def test_kotlin_counts_by_type(self, kotlin_training: Training) -> None:
        assert kotlin_training.number_of_training_activities_by_type(ActivityType.CODE_CHALLENGE) == 2
        assert kotlin_training.number_of_training_activities_by_type(ActivityType.PROJECT_CHALLENGE) == 2
        assert kotlin_training.number_of_training_activities_by_type(ActivityType.COURSE) == 9

    def test_counts_by_type_sum_over_contents(self, kotlin_training: Training) -> None:
        for activity_type in ActivityType:
            expected = sum(
                1
                for content in kotlin_training.contents
                for activity in content.activities
                if activity.type == activity_type
            )
            assert kotlin_training.number_of_training_activities_by_type(activity_type) == expected

    def test_total_activities(self, kotlin_training: Training) -> None:
        assert kotlin_training.number_of_training_activities() == 13

    def test_duration_is_sum_of_contents(self, basic_content, mixed_content) -> None:
        training = _make_training(basic_content, mixed_content)
        assert training.training_duration() == 360 + 720


class TestTrainingLevel:
    def test_mixed_content_rounds_up_to_intermediary(self, mixed_content) -> None:
        # weights 1+1+1+3+3 = 9, 9/5 = 1.8 -> 2
        assert _make_training(mixed_content).training_level() == Level.INTERMEDIARY

    def test_basic_only(self, basic_content) -> None:
        assert _make_training(basic_content).training_level() == Level.BASIC

    def test_all_specialist(self) -> None:
        content = EducationalContent.from_activities(
            "Topo",
            Activity("A", 60, Level.SPECIALIST),
            Activity("B", 60, Level.SPECIALIST),
        )
        assert _make_training(content).training_level() == Level.SPECIALIST

    def test_exact_average_not_rounded_up(self) -> None:
        content = EducationalContent.from_activities(
            "X",
            Activity("A", 60, Level.BASIC),
            Activity("B", 60, Level.ADVANCED),
        )
        # (1 + 3) / 2 = 2.0 exactly
        assert _make_training(content).training_level() == Level.INTERMEDIARY

    def test_kotlin_is_advanced(self, kotlin_training: Training) -> None:
        # 32 / 13 = 2.46 -> 3
        assert kotlin_training.training_level() == Level.ADVANCED

    def test_idempotent(self, kotlin_training: Training) -> None:
        assert kotlin_training.training_level() == kotlin_training.training_level()

    def test_weights_pooled_across_contents(self, basic_content) -> None:
        advanced = EducationalContent.from_activities("Adv", Activity("A", 60, Level.ADVANCED))
        # (1 + 1 + 1 + 3) / 4 = 1.5 -> 2
        assert _make_training(basic_content, advanced).training_level() == Level.INTERMEDIARY

    def test_no_contents_raises(self) -> None:
        with pytest.raises(DivisionByZeroError):
            _make_training().training_level()

    def test_only_empty_contents_raises(self) -> None:
        with pytest.raises(ZeroDivisionError):
            _make_training(EducationalContent("Vazio")).training_level()


class TestTrainingLevelFallback:
    """The fallback only runs when no Level matches the rounded weight."""

    @pytest.fixture(autouse=True)
    def _no_level_matches(self, monkeypatch) -> None:
        monkeypatch.setattr(
            "training_catalog.math.level.level_for_weight", lambda weight: None
        )

    def test_uses_highest_content_level(self, kotlin_training: Training) -> None:
        assert kotlin_training.training_level() == Level.SPECIALIST

    def test_logs_warning(self, kotlin_training: Training, caplog) -> None:
        with caplog.at_level(logging.WARNING):
            kotlin_training.training_level()
        assert "No level with weight 3" in caplog.text

    def test_empty_content_raises(self, basic_content) -> None:
        training = _make_training(basic_content, EducationalContent("Vazio"))
        with pytest.raises(EmptyCollectionError):
            training.training_level()
