import logging

import pytest

from legal_text_simplifier import huggingface_llm, openai_llm
from legal_text_simplifier.errors import (
    ConfigurationError,
    RemoteProviderError,
    SimplificationFailed,
    ValidationError,
)
from legal_text_simplifier.pipeline import (
    SimplificationOptions,
    batch_simplify_texts,
    preserve_document_structure,
    simplify_legal_text,
    word_count_reduction,
)
from legal_text_simplifier.readability import round_half_up
from legal_text_simplifier.simplify import basic_simplification
from legal_text_simplifier.text_utils import count_words


EXAMPLE = "The party shall, notwithstanding any prior agreement, heretofore comply."
BASIC = SimplificationOptions(method="basic")


def _recording(returns=None, raises=None):
    calls = []

    def fake(text, *, config):
        calls.append((text, config))
        if raises is not None:
            raise raises
        return returns

    return fake, calls


@pytest.mark.parametrize("text", ["", "   \n\t"])
def test_empty_text_rejected(text, no_keys):
    with pytest.raises(ValidationError, match="No text provided"):
        simplify_legal_text(text, settings=no_keys)


def test_unknown_method_rejected(no_keys):
    with pytest.raises(ValidationError):
        simplify_legal_text(EXAMPLE, SimplificationOptions(method="fancy"), settings=no_keys)  # type: ignore[arg-type]


def test_unknown_provider_rejected(no_keys):
    opts = SimplificationOptions(method="ai", ai_provider="bard")  # type: ignore[arg-type]
    with pytest.raises(ValidationError):
        simplify_legal_text(EXAMPLE, opts, settings=no_keys)


def test_basic_result(no_keys):
    r = simplify_legal_text(EXAMPLE, BASIC, settings=no_keys)
    assert r.original_text == EXAMPLE
    assert r.simplified_text == "The party will, despite any before agreement, before this comply."
    assert r.method == "basic"
    assert r.provider is None
    # 9 words in, 10 words out
    assert r.word_count_reduction == -11
    assert isinstance(r.readability_score, int)
    assert 0 <= r.readability_score <= 100


@pytest.mark.parametrize(
    "text",
    [
        EXAMPLE,
        "In the event that the lessee is required to be present, the lessor shall be notified by the agent.",
        "Whereas the parties hereby agree, inter alia, to the terms herein.",
    ],
)
def test_word_count_reduction_formula(text, no_keys):
    r = simplify_legal_text(text, BASIC, settings=no_keys)
    before, after = count_words(text), count_words(r.simplified_text)
    assert r.word_count_reduction == round_half_up((before - after) / before * 100)


def test_word_count_reduction_positive():
    assert word_count_reduction("one two three four", "one two") == 50


def test_structure_preservation_is_a_no_op():
    original = "1. Rent\n(a) The tenant shall pay.\nSection 2 Repairs"
    assert preserve_document_structure("simplified", original) == "simplified"


def test_preserve_structure_flag_does_not_change_basic_output(no_keys):
    a = simplify_legal_text(EXAMPLE, SimplificationOptions(method="basic", preserve_structure=True), settings=no_keys)
    b = simplify_legal_text(EXAMPLE, SimplificationOptions(method="basic", preserve_structure=False), settings=no_keys)
    assert a.simplified_text == b.simplified_text


def test_hybrid_without_keys_uses_basic(no_keys):
    r = simplify_legal_text(EXAMPLE, settings=no_keys)
    assert r.method == "hybrid"
    assert r.simplified_text == basic_simplification(EXAMPLE)
    assert r.provider is None


def test_hybrid_refines_basic_result_with_openai(monkeypatch, openai_only):
    fake, calls = _recording(returns="  The party must comply.  ")
    monkeypatch.setattr(openai_llm, "simplify_text", fake)

    r = simplify_legal_text(EXAMPLE, settings=openai_only)

    assert r.simplified_text == "The party must comply."
    assert r.provider == "openai"
    assert len(calls) == 1
    assert calls[0][0] == basic_simplification(EXAMPLE)
    assert calls[0][1].api_key == "sk-test"


def test_hybrid_prefers_openai_over_huggingface(monkeypatch):
    from legal_text_simplifier.config import Settings

    oa, oa_calls = _recording(returns="openai text.")
    hf, hf_calls = _recording(returns="hf text.")
    monkeypatch.setattr(openai_llm, "simplify_text", oa)
    monkeypatch.setattr(huggingface_llm, "simplify_text", hf)

    r = simplify_legal_text(EXAMPLE, settings=Settings(openai_api_key="sk", huggingface_api_key="hf"))

    assert r.simplified_text == "openai text."
    assert len(oa_calls) == 1
    assert hf_calls == []


def test_hybrid_uses_huggingface_when_only_key(monkeypatch, huggingface_only):
    fake, calls = _recording(returns="Plain words.")
    monkeypatch.setattr(huggingface_llm, "simplify_text", fake)

    r = simplify_legal_text(EXAMPLE, settings=huggingface_only)

    assert r.simplified_text == "Plain words."
    assert r.provider == "huggingface"
    assert len(calls) == 1


def test_hybrid_falls_back_on_remote_failure(monkeypatch, openai_only, caplog):
    fake, _ = _recording(raises=RemoteProviderError("AI simplification failed: quota exceeded", provider="openai"))
    monkeypatch.setattr(openai_llm, "simplify_text", fake)

    with caplog.at_level(logging.WARNING, logger="legal_text_simplifier.pipeline"):
        r = simplify_legal_text(EXAMPLE, settings=openai_only)

    assert r.simplified_text == basic_simplification(EXAMPLE)
    assert r.provider is None
    assert "quota exceeded" in caplog.text


def test_ai_sends_raw_text_to_requested_provider(monkeypatch, huggingface_only):
    fake, calls = _recording(returns="Short version.")
    monkeypatch.setattr(huggingface_llm, "simplify_text", fake)

    opts = SimplificationOptions(method="ai", ai_provider="huggingface")
    r = simplify_legal_text(EXAMPLE, opts, settings=huggingface_only)

    assert calls[0][0] == EXAMPLE
    assert r.simplified_text == "Short version."
    assert r.method == "ai"
    assert r.provider == "huggingface"


def test_ai_without_key_raises_configuration_error(no_keys):
    with pytest.raises(ConfigurationError, match="OpenAI API key not configured"):
        simplify_legal_text(EXAMPLE, SimplificationOptions(method="ai"), settings=no_keys)


def test_ai_remote_failure_raises_simplification_failed(monkeypatch, openai_only):
    fake, _ = _recording(raises=RemoteProviderError("AI simplification failed: 401 unauthorized", provider="openai"))
    monkeypatch.setattr(openai_llm, "simplify_text", fake)

    with pytest.raises(SimplificationFailed, match="401 unauthorized") as info:
        simplify_legal_text(EXAMPLE, SimplificationOptions(method="ai"), settings=openai_only)

    assert info.value.provider == "openai"
    assert isinstance(info.value.__cause__, RemoteProviderError)


def test_batch_isolates_failures(no_keys):
    texts = ["The party shall comply.", "", "Notwithstanding the above, the tenant pays."]

    results = batch_simplify_texts(texts, BASIC, settings=no_keys)

    assert [r.index for r in results] == [0, 1, 2]
    assert [r.success for r in results] == [True, False, True]
    assert results[1].error == "No text provided"
    assert results[1].result is None
    assert results[2].result.simplified_text == "despite the above, the tenant pays."

    ok = results[0].to_dict()
    assert ok["success"] is True
    assert ok["simplified_text"] == "The party will comply."
    failed = results[1].to_dict()
    assert failed == {"index": 1, "success": False, "error": "No text provided", "original_text": ""}


def test_batch_continues_after_remote_failure(monkeypatch, openai_only):
    fake, calls = _recording(raises=RemoteProviderError("boom", provider="openai"))
    monkeypatch.setattr(openai_llm, "simplify_text", fake)

    results = batch_simplify_texts(["First text.", "Second text."], SimplificationOptions(method="ai"), settings=openai_only)

    assert [r.success for r in results] == [False, False]
    assert len(calls) == 2
    assert "boom" in results[0].error
