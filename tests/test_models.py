"""
Unit tests for request and response models.
"""
import pytest
from pydantic import ValidationError

from busylight.colors import ColorName
from busylight.models import (
    Action,
    BusylightResponse,
    InputValues,
    Sound,
    SoundInput,
)


class TestInputValues:
    """Test action validation and query encoding."""

    @pytest.mark.parametrize("action", ["light", "alert", "jingle", "off", "pulse", "blink", "colorswithFlash"])
    def test_known_actions(self, action):
        assert InputValues.model_validate({"action": action}).action == Action(action)

    @pytest.mark.parametrize("action", ["status", "dance", "LIGHT", ""])
    def test_unknown_actions_rejected(self, action):
        with pytest.raises(ValidationError):
            InputValues.model_validate({"action": action})

    def test_missing_action_rejected(self):
        with pytest.raises(ValidationError):
            InputValues.model_validate({"red": 255})

    def test_to_query_passes_extra_fields(self):
        """Test that extra keys are stringified and None values dropped."""
        values = InputValues.model_validate(
            {"action": Action.LIGHT, "red": 255, "green": 0, "blue": 10, "sound": None}
        )
        assert values.to_query() == {"action": "light", "red": "255", "green": "0", "blue": "10"}

    def test_to_query_renders_enum_values(self):
        values = InputValues.model_validate({"action": "colorswithFlash"})
        assert values.to_query() == {"action": "colorswithFlash"}


class TestSoundInput:
    """Test sound and volume bounds."""

    def test_defaults(self):
        parsed = SoundInput(color="red")
        assert parsed.color is ColorName.red
        assert parsed.sound == 3
        assert parsed.volume == 75

    @pytest.mark.parametrize("sound", [0, 8])
    def test_sound_bounds_accepted(self, sound):
        assert SoundInput(color="red", sound=sound).sound == sound

    @pytest.mark.parametrize("sound", [-1, 9, 100])
    def test_sound_out_of_range(self, sound):
        with pytest.raises(ValidationError):
            SoundInput(color="red", sound=sound)

    @pytest.mark.parametrize("volume", [0, 25, 100])
    def test_volume_bounds_accepted(self, volume):
        assert SoundInput(color="red", volume=volume).volume == volume

    @pytest.mark.parametrize("volume", [-1, 101])
    def test_volume_out_of_range(self, volume):
        with pytest.raises(ValidationError):
            SoundInput(color="red", volume=volume)

    def test_invalid_color(self):
        with pytest.raises(ValidationError):
            SoundInput(color="notacolor")

    def test_sound_enum(self):
        assert Sound.NO_SOUND == 0
        assert Sound.TELEPHONE_PICK_ME_UP == 8
        assert SoundInput(color="red", sound=Sound.FUNKY).sound == 2


def test_response_ok():
    assert BusylightResponse(status=200).ok
    assert not BusylightResponse(status=503, status_text="Service Unavailable").ok
