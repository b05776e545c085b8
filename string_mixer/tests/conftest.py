import pytest

from string_mixer.services.mixer import StringMixer
from string_mixer.services.tokens import TokenService
from string_mixer.tests.helpers import fixed_salt


@pytest.fixture
def mixer():
    """Legacy mixer: 16-character keys, no rejection."""
    return StringMixer()


@pytest.fixture
def seeded_mixer():
    return StringMixer(salt_source=fixed_salt("ABCDEFGHIJ"))


@pytest.fixture
def strict_mixer():
    return StringMixer(strict=True)


@pytest.fixture
def unbounded_mixer():
    return StringMixer(key_width=None)


@pytest.fixture
def token_service(mixer):
    return TokenService(mixer=mixer, app_url="https://app.example.com")


@pytest.fixture
def sample_values():
    """A user identifier and an email, as the account flows mix them."""
    return ["01J8ZQ4X6V3M2K9T7B5N1R0PQS", "jane.doe+alerts@example.co.uk"]
