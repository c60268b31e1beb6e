import logging
import pytest

from relation_snippets import (extract, get_regions, check_span_pair, Span, Token,
                               InvalidSpanOrderError, SpanOutsideSentenceError)
from relation_snippets.data_utils import select_preceding, select_following, select_between
from conftest import whitespace_tokens


TOOK = Span(12, 16, "e1")
ASPIRIN = Span(17, 24, "e2")


def test_context_of_one_token(sentence_tokens):
    res = extract(sentence_tokens, 0, 33, TOOK, "e1", ASPIRIN, "e2", 1)
    assert res == "patient <e1> took </e1> <e2> aspirin </e2> for"


def test_no_context(sentence_tokens):
    res = extract(sentence_tokens, 0, 33, TOOK, "e1", ASPIRIN, "e2", 0)
    assert res == "<e1> took </e1> <e2> aspirin </e2>"


def test_context_truncated_at_sentence_start(sentence_tokens):
    the, patient = Span(0, 3), Span(4, 11)
    res = extract(sentence_tokens, 0, 33, the, "e1", patient, "e2", 2)
    assert res == "<e1> The </e1> <e2> patient </e2> took aspirin"


def test_context_truncated_at_sentence_end(sentence_tokens):
    res = extract(sentence_tokens, 0, 33, Span(25, 28), "e1", Span(29, 33), "e2", 3)
    assert res == "patient took aspirin <e1> for </e1> <e2> pain </e2>"


def test_context_does_not_cross_sentence_boundary():
    text = "Pain noted.\nThe patient took aspirin. Then slept."
    tokens = whitespace_tokens(text)
    res = extract(tokens, 12, 37, Span(12, 15), "e1", Span(24, 28), "e2", 2, text=text)
    assert res == "<e1> The </e1> patient <e2> took </e2> aspirin."


def test_tokens_between_spans(sentence_tokens):
    res = extract(sentence_tokens, 0, 33, Span(0, 3), "e1", Span(29, 33), "e2", 0)
    assert res == "<e1> The </e1> patient took aspirin for <e2> pain </e2>"
    between = res.split("</e1>")[1].split("<e2>")[0].split()
    assert len(between) == 4


def test_multi_token_span_and_new_lines():
    text = "The patient took\naspirin for pain"
    tokens = whitespace_tokens(text)
    res = extract(tokens, 0, len(text), Span(12, 24), "e1", Span(25, 28), "e2", 1, text=text)
    assert res == "patient <e1> took aspirin </e1> <e2> for </e2> pain"
    assert "\n" not in res and "\r" not in res


def test_carriage_returns_in_tokens_are_replaced():
    tokens = [Token(0, 4, "took"), Token(5, 9, "a\r\nb"), Token(10, 17, "aspirin")]
    res = extract(tokens, 0, 17, Span(0, 4), "e1", Span(10, 17), "e2", 1)
    assert res == "<e1> took </e1> a  b <e2> aspirin </e2>"


def test_span_text_without_document_text():
    tokens = whitespace_tokens("took aspirin")
    res = extract(tokens, 0, 12, Span(0, 4, text="TOOK"), "e1", Span(5, 12), "e2", 0)
    assert res == "<e1> TOOK </e1> <e2> aspirin </e2>"


def test_extract_is_pure(sentence_tokens):
    before = list(sentence_tokens)
    first = extract(sentence_tokens, 0, 33, TOOK, "e1", ASPIRIN, "e2", 2)
    second = extract(sentence_tokens, 0, 33, TOOK, "e1", ASPIRIN, "e2", 2)
    assert first == second
    assert sentence_tokens == before


def test_negative_context_size(sentence_tokens):
    with pytest.raises(ValueError):
        extract(sentence_tokens, 0, 33, TOOK, "e1", ASPIRIN, "e2", -1)


def test_out_of_order_spans_are_logged(sentence_tokens, caplog):
    with caplog.at_level(logging.WARNING):
        res = extract(sentence_tokens, 0, 33, ASPIRIN, "e1", TOOK, "e2", 1)
    assert "<e1> aspirin </e1>" in res
    assert "<e2> took </e2>" in res
    assert any("before right span" in rec.getMessage() for rec in caplog.records)


def test_out_of_order_spans_strict(sentence_tokens):
    with pytest.raises(InvalidSpanOrderError):
        extract(sentence_tokens, 0, 33, ASPIRIN, "e1", TOOK, "e2", 1, policy="strict")


def test_span_outside_sentence_strict(sentence_tokens):
    assert issubclass(SpanOutsideSentenceError, InvalidSpanOrderError)
    with pytest.raises(SpanOutsideSentenceError):
        extract(sentence_tokens, 4, 33, Span(0, 3), "e1", TOOK, "e2", 1, policy="strict")
    with pytest.raises(InvalidSpanOrderError):
        extract(sentence_tokens, 4, 33, Span(0, 3), "e1", TOOK, "e2", 1, policy="strict")


def test_span_outside_sentence_is_logged(sentence_tokens, caplog):
    with caplog.at_level(logging.WARNING):
        res = extract(sentence_tokens, 4, 33, Span(0, 3), "e1", TOOK, "e2", 1)
    assert res == "<e1> The </e1> patient <e2> took </e2> aspirin"
    assert any("is not inside sentence (4, 33)" in rec.getMessage() for rec in caplog.records)


def test_reversed_pair_keeps_tokens_between(sentence_tokens, caplog):
    with caplog.at_level(logging.WARNING):
        res = extract(sentence_tokens, 0, 33, Span(29, 33), "e1", TOOK, "e2", 0)
    assert res == "<e1> pain </e1> aspirin for <e2> took </e2>"
    assert [t.text for t in select_between(sentence_tokens, Span(29, 33), TOOK)] == ["aspirin", "for"]


def test_unknown_policy(sentence_tokens):
    with pytest.raises(ValueError):
        check_span_pair(Span(0, 33), TOOK, ASPIRIN, policy="lenient")


def test_well_formed_pair():
    assert check_span_pair(Span(0, 33), TOOK, ASPIRIN, policy="strict")


def test_token_selection(sentence_tokens):
    assert [t.text for t in select_preceding(sentence_tokens, ASPIRIN, 2)] == ["patient", "took"]
    assert [t.text for t in select_preceding(sentence_tokens, ASPIRIN, 0)] == []
    assert [t.text for t in select_following(sentence_tokens, TOOK, 10)] == ["aspirin", "for", "pain"]
    assert select_between(sentence_tokens, TOOK, ASPIRIN) == []


def test_regions(sentence_tokens):
    res = get_regions(sentence_tokens, Span(0, 33), TOOK, ASPIRIN, 1)
    assert res == "patient took||aspirin for"

    res = get_regions(sentence_tokens, Span(0, 33), Span(0, 3), Span(25, 33), 2)
    assert res == "The|patient took aspirin|for pain"


def test_regions_replace_new_lines():
    tokens = [Token(0, 4, "took"), Token(5, 9, "a\r\nb"), Token(10, 17, "aspirin")]
    res = get_regions(tokens, Span(0, 17), Span(0, 4), Span(10, 17), 0)
    assert res == "took|a  b|aspirin"
