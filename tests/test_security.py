"""
Tests for the parent PIN.
"""

import pytest

from quest.constants import PIN_CONFIG_KEY
from quest.models import AppData
from quest.security import PinError, has_pin, hash_pin, legacy_hash_pin, set_pin, verify_pin
from quest.transfer import dump_snapshot, load_snapshot


class TestParentPin:

    def test_set_then_verify(self):
        data = AppData()
        assert not has_pin(data)

        set_pin(data, "2468")

        assert has_pin(data)
        assert verify_pin(data, "2468")
        assert data.config[PIN_CONFIG_KEY] == hash_pin("2468")
        assert "2468" not in data.config[PIN_CONFIG_KEY]

    @pytest.mark.parametrize("attempt", ["1357", "", "24680"])
    def test_wrong_pin_is_rejected(self, attempt):
        data = AppData()
        set_pin(data, "2468")
        assert not verify_pin(data, attempt)

    def test_nothing_verifies_without_a_pin(self):
        assert not verify_pin(AppData(), "1234")

    @pytest.mark.parametrize("pin", ["123", "", "abcd", "12 4"])
    def test_short_or_non_digit_pin_is_refused(self, pin):
        data = AppData()
        with pytest.raises(PinError):
            set_pin(data, pin)
        assert not has_pin(data)

    def test_change_pin_replaces_old_one(self):
        data = AppData()
        set_pin(data, "2468")
        set_pin(data, "97531")
        assert verify_pin(data, "97531")
        assert not verify_pin(data, "2468")

    def test_sha256_hex_digest(self):
        assert hash_pin("1234") == "03ac674216f3e15c761ee1a5e255f067953623c8b388b4459e13f978d7c846f4"

    def test_legacy_hash_still_unlocks(self):
        data = AppData(config={PIN_CONFIG_KEY: "legacy_2088290703"})
        assert legacy_hash_pin("1234") == "legacy_2088290703"
        assert verify_pin(data, "1234")
        assert not verify_pin(data, "4321")

    def test_pin_survives_backup(self, app_data):
        set_pin(app_data, "8080")
        restored = load_snapshot(dump_snapshot(app_data))
        assert verify_pin(restored, "8080")
