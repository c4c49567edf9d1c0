"""test_obfuscator.py - Unit tests for message obfuscation.

Covers:
    - SimpleNumberObfuscator masks every digit and nothing else
    - Mask validation
    - ObfuscatorRegistry decision rule: per-call override > default flag
    - No installed obfuscator means no change
"""

import pytest

from xloglib.obfuscator import ObfuscatorRegistry, SimpleNumberObfuscator


class TestSimpleNumberObfuscator:
    def test_masks_every_digit(self):
        result = SimpleNumberObfuscator()("Ivanov: +71234567890")
        assert result == "Ivanov: +***********"
        assert not any(ch.isdigit() for ch in result)

    def test_leaves_text_without_digits_unchanged(self):
        assert SimpleNumberObfuscator()("no numbers here") == "no numbers here"

    def test_custom_mask(self):
        assert SimpleNumberObfuscator(mask="#")("pin 1234") == "pin ####"

    @pytest.mark.parametrize("mask", ["", "**", "7"])
    def test_invalid_mask_rejected(self, mask):
        with pytest.raises(ValueError):
            SimpleNumberObfuscator(mask=mask)


class TestObfuscatorRegistry:
    def setup_method(self):
        self.registry = ObfuscatorRegistry()

    def test_defaults(self):
        assert self.registry.obfuscator is None
        assert self.registry.obfuscate_by_default is False

    def test_no_obfuscator_leaves_message_unchanged(self):
        """obfuscate=True with nothing installed is a no-op."""
        assert self.registry.apply("card 4111", obfuscate=True) == "card 4111"

    def test_default_off_skips_obfuscator(self):
        self.registry.set_obfuscator(SimpleNumberObfuscator())
        assert self.registry.apply("card 4111") == "card 4111"

    def test_default_on_applies_obfuscator(self):
        self.registry.set_obfuscator(SimpleNumberObfuscator())
        self.registry.set_obfuscate_by_default(True)
        assert self.registry.apply("card 4111") == "card ****"

    def test_per_call_false_bypasses_default_on(self):
        self.registry.set_obfuscator(SimpleNumberObfuscator())
        self.registry.set_obfuscate_by_default(True)
        assert self.registry.apply("card 4111", obfuscate=False) == "card 4111"

    def test_per_call_true_overrides_default_off(self):
        self.registry.set_obfuscator(SimpleNumberObfuscator())
        assert self.registry.apply("card 4111", obfuscate=True) == "card ****"

    def test_any_callable_can_be_installed(self):
        self.registry.set_obfuscator(str.upper)
        assert self.registry.apply("secret", obfuscate=True) == "SECRET"

    def test_set_obfuscator_none_uninstalls(self):
        self.registry.set_obfuscator(SimpleNumberObfuscator())
        self.registry.set_obfuscator(None)
        assert self.registry.apply("card 4111", obfuscate=True) == "card 4111"

    def test_non_callable_rejected(self):
        with pytest.raises(TypeError):
            self.registry.set_obfuscator("not callable")
