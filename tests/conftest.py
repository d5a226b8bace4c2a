import pytest

from legal_text_simplifier.config import Settings


@pytest.fixture
def no_keys():
    return Settings()


@pytest.fixture
def openai_only():
    return Settings(openai_api_key="sk-test")


@pytest.fixture
def huggingface_only():
    return Settings(huggingface_api_key="hf-test")
