"""
Token windows around a pair of annotated spans

The functions here work on plain token lists ordered by start offset, the way a
relation candidate looks after sentence splitting and tokenization:

    tokens:   [Token(0, 3, 'The'), Token(4, 11, 'patient'), ...]
    sentence: Span(0, 36)
    spans:    Span(12, 16, 'e1'), Span(17, 24, 'e2')

get_tokens_between (exported as extract) serializes the pair with markers:
    patient <e1> took </e1> <e2> aspirin </e2> for
get_regions serializes it as three regions:
    patient took|<between tokens>|aspirin for
"""
import re
from collections import namedtuple
from .config import (EN_START_TEMPLATE, EN_END_TEMPLATE, REGION_SEP, PERMISSIVE, STRICT,
                     SPAN_ORDER_POLICIES)
from .utils import SnippetLogger, InvalidSpanOrderError, SpanOutsideSentenceError


logger = SnippetLogger(logger_level='i').get_logger()

NEW_LINE_PATTERN = re.compile(r"[\r\n]")


class Token(namedtuple("Token", ["start", "end", "text"])):
    """A single token with its character offsets in the document."""
    __slots__ = ()

    def __str__(self):
        return "{}({}, {})".format(self.text, self.start, self.end)


class Span(namedtuple("Span", ["start", "end", "label", "text"])):
    """
    A contiguous character range (a mention or a sentence).

    Args:
        start, end: character offsets, end exclusive
        label: (Optional) used only when rendering markers
        text: (Optional) the raw covered text if it is known
    """
    __slots__ = ()

    def __new__(cls, start, end, label=None, text=None):
        return super().__new__(cls, start, end, label, text)

    def covers(self, other):
        return self.start <= other.start and other.end <= self.end


def normalize_new_lines(text):
    return NEW_LINE_PATTERN.sub(" ", text)


def select_preceding(tokens, annotation, count):
    """the `count` tokens ending at or before annotation.start, in document order"""
    if count <= 0:
        return []
    preceding = [token for token in tokens if token.end <= annotation.start]
    return preceding[-count:]


def select_following(tokens, annotation, count):
    """the `count` tokens starting at or after annotation.end"""
    if count <= 0:
        return []
    following = [token for token in tokens if token.start >= annotation.end]
    return following[:count]


def select_between(tokens, left, right):
    """tokens strictly between the two annotations, whichever of them comes first"""
    if left.start > right.start:
        left, right = right, left
    return [token for token in tokens if token.start >= left.end and token.end <= right.start]


def select_covered(tokens, annotation):
    return [token for token in tokens if annotation.covers(token)]


def covered_text(annotation, tokens, text=None):
    if text is not None:
        return text[annotation.start:annotation.end]
    if annotation.text is not None:
        return annotation.text
    return " ".join(token.text for token in select_covered(tokens, annotation))


def check_span_pair(sentence, left, right, policy=PERMISSIVE):
    """
    Report a span pair that is out of order or not inside the sentence.

    permissive: log a warning and return False so the caller may still carry on
    strict: raise InvalidSpanOrderError or SpanOutsideSentenceError

    return True if the pair is well formed
    """
    if policy not in SPAN_ORDER_POLICIES:
        raise ValueError("expect policy to be one of {} but get {}".format(sorted(SPAN_ORDER_POLICIES), policy))

    errors = []
    if left.start > right.start:
        errors.append(InvalidSpanOrderError(
            "We assumed left span is always before right span but get left: {} and right: {}".format(
                (left.start, left.end), (right.start, right.end))))
    for each in (left, right):
        if not sentence.covers(each):
            errors.append(SpanOutsideSentenceError(
                "span {} is not inside sentence {}".format((each.start, each.end), (sentence.start, sentence.end))))

    if not errors:
        return True
    if policy == STRICT:
        raise errors[0]
    for error in errors:
        logger.warning(str(error))

    return False


def get_tokens_between(tokens, sentence_start, sentence_end, left, left_type, right, right_type,
                       context_size, text=None, policy=PERMISSIVE):
    """
    Return the marked context of a span pair as a single string

    :param tokens: tokens ordered by start offset, covering at least the sentence
    :param left: span before right (unchecked unless policy is strict)
    :param left_type: marker label of left, e.g. e1 renders <e1> ... </e1>
    :param context_size: number of tokens to include on the left of left and on the right of right
    :param text: the document text; if given, the markers wrap the raw text of the spans
    :param policy: permissive (log and continue) or strict (raise on malformed pairs)
    """
    if context_size < 0:
        raise ValueError("context_size should be non-negative but get {}".format(context_size))

    sentence = Span(sentence_start, sentence_end)
    check_span_pair(sentence, left, right, policy=policy)

    pieces = []
    for token in select_preceding(tokens, left, context_size):
        if sentence_start <= token.start:
            pieces.append(token.text)
    pieces.append(EN_START_TEMPLATE.format(left_type))
    pieces.append(covered_text(left, tokens, text))
    pieces.append(EN_END_TEMPLATE.format(left_type))
    for token in select_between(tokens, left, right):
        pieces.append(token.text)
    pieces.append(EN_START_TEMPLATE.format(right_type))
    pieces.append(covered_text(right, tokens, text))
    pieces.append(EN_END_TEMPLATE.format(right_type))
    for token in select_following(tokens, right, context_size):
        if token.end <= sentence_end:
            pieces.append(token.text)

    return normalize_new_lines(" ".join(pieces))


extract = get_tokens_between


def get_regions(tokens, sentence, left, right, context_size, policy=PERMISSIVE):
    """
    Return left|between|right where left holds the context before the left span plus its tokens
    and right holds the tokens of the right span plus the context after it
    """
    if context_size < 0:
        raise ValueError("context_size should be non-negative but get {}".format(context_size))

    check_span_pair(sentence, left, right, policy=policy)

    left_tokens = [token.text for token in select_preceding(tokens, left, context_size)
                   if sentence.start <= token.start]
    left_tokens.extend(token.text for token in select_covered(tokens, left))

    between_tokens = [token.text for token in select_between(tokens, left, right)]

    right_tokens = [token.text for token in select_covered(tokens, right)]
    right_tokens.extend(token.text for token in select_following(tokens, right, context_size)
                        if token.end <= sentence.end)

    return REGION_SEP.join(normalize_new_lines(" ".join(each)) for each in (left_tokens, between_tokens, right_tokens))
