"""
Unit Tests: Value Objects

Covers the value object capability and the concrete value types:
- structural equality and hashing
- copy_with without mutating the receiver
- validation on construction
- alias normalization
"""

from dataclasses import dataclass

import pytest

from personas.domain.exceptions import ValidationError
from personas.domain.value_objects import (
    Alias,
    ModelConfig,
    PersonalityId,
    PersonalityProfile,
    UserId,
    ValueObject,
)


# ============================================================================
# FIXTURES
# ============================================================================

@pytest.fixture
def profile():
    """Profile for the Cold personality"""
    return PersonalityProfile(
        name="cold-kerach-batuach",
        prompt="You are Cold",
        model_path="/cold",
        max_word_count=500,
        display_name="Cold",
    )


@pytest.fixture
def model():
    """Multimodal model config"""
    return ModelConfig(
        name="gpt-4",
        endpoint="/gpt-4",
        max_tokens=8192,
        supports_images=True,
    )


# ============================================================================
# EQUALITY AND HASH TESTS
# ============================================================================

def test_equality_is_structural(profile):
    """Test: two profiles with the same fields are equal"""
    same = PersonalityProfile(
        name="cold-kerach-batuach",
        prompt="You are Cold",
        model_path="/cold",
        max_word_count=500,
        display_name="Cold",
    )

    assert profile == same
    assert profile is not same
    assert hash(profile) == hash(same)
    assert profile.hash_code() == same.hash_code()


def test_equality_is_reflexive_and_symmetric(model):
    """Test: a == a, and a == b implies b == a"""
    other = ModelConfig(name="gpt-4", endpoint="/gpt-4", max_tokens=8192, supports_images=True)

    assert model == model
    assert model == other
    assert other == model


def test_unequal_values(model):
    """Test: any differing field breaks equality"""
    assert model != model.copy_with(supports_audio=True)
    assert model != model.copy_with(max_tokens=1024)


def test_equals_none_is_false(profile, model):
    """Test: comparing with None is always False"""
    assert (profile == None) is False  # noqa: E711
    assert (model == None) is False  # noqa: E711
    assert UserId("u1") != None  # noqa: E711


def test_different_type_with_same_fields_is_not_equal():
    """Test: UserId('x') and Alias('x') both wrap 'x' but are not equal"""
    user_id = UserId("cold")
    alias = Alias("cold")

    assert user_id.snapshot() == alias.snapshot()
    assert user_id != alias
    assert alias != user_id


def test_value_objects_work_as_dict_keys():
    """Test: equal values hit the same dict slot"""
    owners = {UserId("u1"): "first"}

    assert owners[UserId("u1")] == "first"
    assert len({Alias("Cold"), Alias("cold"), Alias(" COLD ")}) == 1


def test_hash_code_is_deterministic(model):
    """Test: hash_code does not depend on the instance"""
    assert model.hash_code() == ModelConfig.from_dict(model.to_dict()).hash_code()


@dataclass(frozen=True, eq=False)
class Temperature(ValueObject):
    degrees: float


@pytest.mark.parametrize("left,right", [(1, 1.0), (True, 1), (0.0, False), (2.5, 2.5)])
def test_equal_numbers_hash_alike(left, right):
    """Test: values equal across int, float and bool also hash equal"""
    a, b = Temperature(left), Temperature(right)

    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b}) == 1


def test_different_numbers_hash_differently():
    assert Temperature(1.5) != Temperature(1)
    assert hash(Temperature(1.5)) != hash(Temperature(1))


# ============================================================================
# COPY_WITH TESTS
# ============================================================================

def test_copy_with_does_not_mutate_receiver(profile):
    """Test: copy_with returns a new instance and leaves the original alone"""
    updated = profile.copy_with(prompt="You are Warm")

    assert profile.prompt == "You are Cold"
    assert updated.prompt == "You are Warm"
    assert updated.name == profile.name
    assert updated.max_word_count == profile.max_word_count
    assert updated != profile


def test_copy_with_ignores_none(profile):
    """Test: None overrides keep the current value"""
    updated = profile.copy_with(prompt=None, max_word_count=None)

    assert updated == profile


def test_copy_with_validates(profile):
    """Test: the copy goes through validation too"""
    with pytest.raises(ValidationError):
        profile.copy_with(max_word_count=-5)


def test_copy_with_rejects_unknown_fields(profile):
    """Test: unknown field names raise TypeError"""
    with pytest.raises(TypeError):
        profile.copy_with(temperature=0.7)


# ============================================================================
# VALIDATION TESTS
# ============================================================================

@pytest.mark.parametrize("budget", [0, -1, "1000", 1.5, True])
def test_profile_rejects_invalid_token_budget(budget):
    """Test: the token budget must be a positive integer"""
    with pytest.raises(ValidationError) as exc_info:
        PersonalityProfile(name="cold", prompt="You are Cold", max_word_count=budget)

    assert exc_info.value.code == "VALIDATION_ERROR"


def test_profile_requires_name_and_prompt():
    """Test: empty name or prompt fail validation"""
    with pytest.raises(ValidationError):
        PersonalityProfile(name="", prompt="You are Cold")

    with pytest.raises(ValidationError):
        PersonalityProfile(name="cold", prompt="   ")


def test_profile_defaults_and_display_name():
    """Test: defaults and display name fallback"""
    profile = PersonalityProfile.for_name("cold")

    assert profile.prompt == "You are cold"
    assert profile.model_path == "/default"
    assert profile.max_word_count == 1000
    assert profile.effective_display_name == "cold"
    assert profile.copy_with(display_name="Cold").effective_display_name == "Cold"


def test_model_config_validation():
    """Test: model config checks name, endpoint and capability flags"""
    with pytest.raises(ValidationError):
        ModelConfig(name="")

    with pytest.raises(ValidationError):
        ModelConfig(name="gpt-4", max_tokens=0)

    with pytest.raises(ValidationError):
        ModelConfig(name="gpt-4", supports_images="yes")


def test_model_config_default_and_from_dict():
    """Test: default model and legacy nested capabilities"""
    default = ModelConfig.create_default()
    legacy = ModelConfig.from_dict({
        "name": "claude",
        "endpoint": "/claude",
        "capabilities": {"max_tokens": 2048, "supports_audio": True},
    })

    assert default.name == "default"
    assert default.endpoint == "/default"
    assert default.is_multimodal is False
    assert legacy.max_tokens == 2048
    assert legacy.supports_audio is True
    assert legacy.is_multimodal is True


def test_user_id_validation():
    """Test: user IDs must be non-empty strings; ints are coerced by of()"""
    with pytest.raises(ValidationError):
        UserId("")

    with pytest.raises(ValidationError):
        UserId(None)

    assert UserId.of(123456789) == UserId("123456789")
    assert str(UserId("u1")) == "u1"


def test_personality_id():
    """Test: personality IDs are trimmed slugs compared by value"""
    assert PersonalityId(" cold-kerach-batuach ").value == "cold-kerach-batuach"
    assert PersonalityId("cold") == PersonalityId("cold")
    assert PersonalityId.of("cold") == PersonalityId("cold")

    with pytest.raises(ValidationError):
        PersonalityId("")

    with pytest.raises(ValidationError):
        PersonalityId("two words")

    generated = PersonalityId.generate()
    assert generated.value.startswith("personality-")
    assert generated != PersonalityId.generate()


# ============================================================================
# ALIAS TESTS
# ============================================================================

def test_alias_is_normalized():
    """Test: aliases are trimmed and lower-cased, original spelling is kept"""
    alias = Alias("  Cold ")

    assert alias.value == "cold"
    assert alias.original == "Cold"
    assert str(alias) == "cold"
    assert alias.to_dict() == {"value": "cold", "original": "Cold"}


def test_alias_equality_is_case_insensitive():
    """Test: Alias('Cold') == Alias('COLD')"""
    assert Alias("Cold") == Alias("COLD")
    assert hash(Alias("Cold")) == hash(Alias("cold"))


@pytest.mark.parametrize("raw", ["", "   ", None, 42])
def test_alias_rejects_empty_or_non_string(raw):
    """Test: empty and non-string aliases fail validation"""
    with pytest.raises(ValidationError):
        Alias(raw)


def test_alias_rejects_overlong_value():
    """Test: aliases have a length cap"""
    with pytest.raises(ValidationError):
        Alias("x" * (Alias.MAX_LENGTH + 1))


@pytest.mark.parametrize("raw,expected", [
    ("Cold", "cold"),
    ("  MiXeD Case ", "mixed case"),
    ("", None),
    ("   ", None),
    (None, None),
    (7, None),
])
def test_alias_normalize(raw, expected):
    """Test: normalize never raises"""
    assert Alias.normalize(raw) == expected


def test_alias_copy_with_resets_original():
    """Test: copying an alias with a new value normalizes it again"""
    copy = Alias("Cold").copy_with(value="WARM")

    assert copy.value == "warm"
    assert copy.original == "WARM"
