"""Tests for template and profile models"""

import pytest
from pydantic import ValidationError

from aws_login.models import Profile, Template


class TestTemplate:
    def test_defaults(self):
        template = Template()
        assert template.enabled is True
        assert template.extends is None
        assert template.settings == {}

    def test_frozen(self):
        template = Template(settings={"region": "eu-west-1"})
        with pytest.raises(ValidationError):
            template.enabled = False

    def test_unknown_fields_ignored(self):
        template = Template.model_validate({"description": "ignored", "settings": {}})
        assert not hasattr(template, "description")

    def test_keeps_raw_json_values(self):
        template = Template.model_validate_json(
            '{"settings": {"a": 1, "b": true, "c": null, "d": [1]}}'
        )
        assert template.settings == {"a": 1, "b": True, "c": None, "d": [1]}

    @pytest.mark.parametrize("enabled", ["yes", 1])
    def test_enabled_must_be_boolean(self, enabled):
        with pytest.raises(ValidationError):
            Template.model_validate({"enabled": enabled})


class TestProfile:
    def test_str_is_name(self):
        assert str(Profile(name="dev")) == "dev"

    def test_sorted_by_name(self):
        profiles = [Profile(name="prod"), Profile(name="dev"), Profile(name="qa")]
        assert [p.name for p in sorted(profiles)] == ["dev", "prod", "qa"]

    def test_settings_are_strings(self):
        with pytest.raises(ValidationError):
            Profile(name="dev", settings={"region": ["eu-west-1"]})
