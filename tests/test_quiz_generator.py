"""Tests for QuizGenerator (services/quiz.py): model path, fallback path, prompt."""
import asyncio
import json

import pytest
from factories import make_item, make_items, stub_model, wrap

from certiai.errors import ModelUnavailableError
from certiai.services.bank import FALLBACK_BANK
from certiai.services.quiz import QuizGenerator, build_prompt
from certiai.settings import QuizConfig


def run(coro):
    return asyncio.run(coro)


class TestBuildPrompt:
    def test_deterministic(self):
        assert build_prompt("Python") == build_prompt("Python")

    def test_mentions_skill_and_shape(self):
        p = build_prompt("Vue.js")
        assert "5 multiple choice questions about Vue.js" in p
        for key in ('"question"', '"options"', '"correctAnswer"', '"explanation"'):
            assert key in p
        assert "intermediate" in p
        assert "JSON array" in p


class TestModelPath:
    def test_prose_wrapped_array_is_used(self):
        items = make_items(5)
        call = stub_model(wrap(items))
        gen = QuizGenerator(call)
        out = run(gen.generate_with_source("Python"))
        assert out.source == "model"
        assert [q.question for q in out.questions] == [i["question"] for i in items]
        assert [q.correct_answer for q in out.questions] == [0, 1, 2, 3, 0]
        assert call.prompts == [build_prompt("Python")]

    def test_generate_returns_tuple_of_five(self):
        gen = QuizGenerator(stub_model(json.dumps(make_items(5))))
        questions = run(gen.generate("React"))
        assert isinstance(questions, tuple)
        assert len(questions) == 5

    def test_extra_valid_items_truncated(self):
        items = make_items(7)
        out = run(QuizGenerator(stub_model(wrap(items))).generate_with_source("CSS"))
        assert out.source == "model"
        assert [q.question for q in out.questions] == [i["question"] for i in items[:5]]

    def test_single_model_call(self):
        call = stub_model(wrap(make_items(5)))
        run(QuizGenerator(call).generate("HTML"))
        assert len(call.prompts) == 1


class TestFallbackPath:
    def test_model_unavailable_uses_skill_set(self):
        gen = QuizGenerator(stub_model(exc=ModelUnavailableError("quota")))
        out = run(gen.generate_with_source("JavaScript"))
        assert out.source == "fallback"
        assert out.questions is FALLBACK_BANK["JavaScript"]

    def test_any_exception_from_call_falls_back(self):
        gen = QuizGenerator(stub_model(exc=TimeoutError("slow")))
        assert run(gen.generate("React")) is FALLBACK_BANK["React"]

    def test_prose_only_response(self):
        gen = QuizGenerator(stub_model("Sorry, I can't generate that right now."))
        assert run(gen.generate("Python")) is FALLBACK_BANK["Python"]

    def test_none_response(self):
        gen = QuizGenerator(stub_model(None))
        assert run(gen.generate("Python")) is FALLBACK_BANK["Python"]

    def test_fewer_than_five(self):
        gen = QuizGenerator(stub_model(wrap(make_items(4))))
        assert run(gen.generate("PHP")) is FALLBACK_BANK["PHP"]

    def test_one_out_of_range_answer_rejects_whole_set(self):
        items = make_items(5)
        items[2]["correctAnswer"] = 4
        gen = QuizGenerator(stub_model(wrap(items)))
        out = run(gen.generate_with_source("Angular"))
        assert out.source == "fallback"
        assert out.questions is FALLBACK_BANK["Angular"]

    def test_missing_required_field(self):
        items = make_items(5)
        del items[0]["options"]
        gen = QuizGenerator(stub_model(wrap(items)))
        assert run(gen.generate("TypeScript")) is FALLBACK_BANK["TypeScript"]

    def test_invalid_extra_item_rejects_set(self):
        items = make_items(5) + [make_item(5, options=["only", "two"])]
        gen = QuizGenerator(stub_model(wrap(items)))
        assert run(gen.generate("CSS")) is FALLBACK_BANK["CSS"]

    @pytest.mark.parametrize("raw", [
        "Here: " + "[" * 100_000 + "]" * 100_000,
        "[" + "1" * 5000 + "]",
    ])
    def test_undecodable_span_falls_back(self, raw):
        gen = QuizGenerator(stub_model(raw))
        assert run(gen.generate("Python")) is FALLBACK_BANK["Python"]

    def test_unknown_skill_uses_configured_default(self):
        gen = QuizGenerator(stub_model(exc=ModelUnavailableError("down")),
                            QuizConfig(default_skill="Python"))
        assert run(gen.generate("Rust")) is FALLBACK_BANK["Python"]

    def test_cancellation_propagates(self):
        async def cancelled(prompt):
            raise asyncio.CancelledError()

        with pytest.raises(asyncio.CancelledError):
            run(QuizGenerator(cancelled).generate("Python"))
