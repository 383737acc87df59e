"""
Unit tests for domain models.

These tests verify:
- Field-name normalization at the model boundary
- Model validation and immutability
- Computed properties
"""

import pytest
from pydantic import ValidationError


@pytest.mark.unit
class TestExerciseTypeMapping:
    """Tests for exercise type code mapping."""

    @pytest.mark.parametrize(
        "type_id,expected",
        [
            (1, "warm up"),
            (2, "gym"),
            (3, "circuit"),
            (4, "isometric"),
            (5, "plyometric"),
            (6, "sprint"),
            (7, "drill"),
        ],
    )
    def test_known_codes(self, type_id, expected):
        from domain.models import get_exercise_group_type

        assert get_exercise_group_type(type_id).value == expected

    @pytest.mark.parametrize("type_id", [0, 8, 99, -1, None])
    def test_unknown_codes_map_to_other(self, type_id):
        from domain.models import ExerciseGroupType, get_exercise_group_type

        assert get_exercise_group_type(type_id) == ExerciseGroupType.OTHER


@pytest.mark.unit
class TestExerciseInstanceModel:
    """Tests for the ExerciseInstance value object."""

    def test_snake_case_fields(self):
        from domain.models import ExerciseInstance

        ex = ExerciseInstance.model_validate(
            {"id": 1, "exercise_type_id": 2, "preset_order": 3, "superset_id": 9}
        )
        assert ex.exercise_type_id == 2
        assert ex.preset_order == 3
        assert ex.superset_id == 9

    def test_camel_case_fields(self):
        from domain.models import ExerciseInstance

        ex = ExerciseInstance.model_validate(
            {"id": 1, "exerciseTypeId": 2, "presetOrder": 3, "supersetId": 9}
        )
        assert ex.exercise_type_id == 2
        assert ex.preset_order == 3
        assert ex.superset_id == 9

    def test_position_alias(self):
        from domain.models import ExerciseInstance

        ex = ExerciseInstance.model_validate({"position": 4})
        assert ex.preset_order == 4

    def test_nested_exercise_type(self):
        from domain.models import ExerciseGroupType, ExerciseInstance

        ex = ExerciseInstance.model_validate(
            {"preset_order": 1, "exercise": {"exercise_type_id": 3, "name": "Burpee"}}
        )
        assert ex.exercise_type_id == 3
        assert ex.group_type == ExerciseGroupType.CIRCUIT
        assert ex.model_extra["exercise"]["name"] == "Burpee"

    def test_top_level_type_wins_over_nested(self):
        from domain.models import ExerciseInstance

        ex = ExerciseInstance.model_validate(
            {"preset_order": 1, "exerciseTypeId": 2, "exercise": {"exercise_type_id": 3}}
        )
        assert ex.exercise_type_id == 2

    def test_missing_type_is_other(self):
        from domain.models import ExerciseGroupType, ExerciseInstance

        ex = ExerciseInstance(preset_order=1)
        assert ex.exercise_type_id is None
        assert ex.group_type == ExerciseGroupType.OTHER

    def test_extra_fields_round_trip(self):
        from domain.models import ExerciseInstance

        ex = ExerciseInstance(preset_order=1, name="Back Squat", sets=5)
        dumped = ex.model_dump()
        assert dumped["name"] == "Back Squat"
        assert dumped["sets"] == 5
        assert dumped["preset_order"] == 1

    def test_preset_order_required(self):
        from domain.models import ExerciseInstance

        with pytest.raises(ValidationError):
            ExerciseInstance(exercise_type_id=2)

    def test_is_immutable(self):
        from domain.models import ExerciseInstance

        ex = ExerciseInstance(preset_order=1)
        with pytest.raises(ValidationError):
            ex.preset_order = 2

    def test_in_superset(self):
        from domain.models import ExerciseInstance

        assert ExerciseInstance(preset_order=1, superset_id=0).in_superset is True
        assert ExerciseInstance(preset_order=1).in_superset is False

    def test_str(self):
        from domain.models import ExerciseInstance

        ex = ExerciseInstance(preset_order=3, exercise_type_id=2, superset_id=9)
        assert str(ex) == "#3 gym (superset 9)"


@pytest.mark.unit
class TestExerciseGroupModel:
    """Tests for the ExerciseGroup value object."""

    def test_properties(self):
        from domain.models import ExerciseGroup, ExerciseGroupType, ExerciseInstance

        group = ExerciseGroup(
            type=ExerciseGroupType.SUPERSET,
            id=9,
            exercises=[
                ExerciseInstance(preset_order=3, superset_id=9),
                ExerciseInstance(preset_order=4, superset_id=9),
            ],
        )
        assert group.is_superset is True
        assert group.is_gym_merged is False
        assert group.first_order == 3
        assert group.last_order == 4
        assert str(group) == "superset 9 [3, 4]"

    def test_empty_group_orders(self):
        from domain.models import ExerciseGroup, ExerciseGroupType

        group = ExerciseGroup(type=ExerciseGroupType.GYM_MERGED)
        assert group.first_order is None
        assert group.last_order is None

    def test_type_from_string(self):
        from domain.models import ExerciseGroup, ExerciseGroupType

        group = ExerciseGroup.model_validate({"type": "gymMerged", "exercises": []})
        assert group.type == ExerciseGroupType.GYM_MERGED

    def test_invalid_type_rejected(self):
        from domain.models import ExerciseGroup

        with pytest.raises(ValidationError):
            ExerciseGroup.model_validate({"type": "cardio", "exercises": []})


@pytest.mark.unit
class TestProgressionModels:
    """Tests for progression options and weeks."""

    def test_option_defaults(self):
        from domain.models import ProgressionOptions

        options = ProgressionOptions()
        assert options.deload_frequency is None
        assert options.deload_factor == 0.8
        assert options.amplitude == 1
        assert options.period == 3
        assert options.intensity_delta == 2
        assert options.volume_delta == 2
        assert options.target_volume == 3
        assert options.progression_rate == 0.05

    def test_options_accept_camel_case(self):
        from domain.models import ProgressionOptions

        options = ProgressionOptions.model_validate(
            {"deloadFrequency": 4, "deloadFactor": 0.7, "targetVolume": 2}
        )
        assert options.deload_frequency == 4
        assert options.deload_factor == 0.7
        assert options.target_volume == 2

    def test_week_rejects_out_of_scale_values(self):
        from domain.models import ProgressionWeek

        with pytest.raises(ValidationError):
            ProgressionWeek(week=1, intensity=11, volume=5)
        with pytest.raises(ValidationError):
            ProgressionWeek(week=1, intensity=5, volume=0)

    def test_catalog_covers_every_model(self):
        from domain.models import PROGRESSION_MODEL_CATALOG, ProgressionModel

        assert set(PROGRESSION_MODEL_CATALOG) == set(ProgressionModel)
        for model, info in PROGRESSION_MODEL_CATALOG.items():
            assert info.model == model
            assert "deload_frequency" in info.options
