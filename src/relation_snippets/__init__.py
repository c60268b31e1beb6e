from .config import VERSION
from .data_utils import Token, Span, extract, get_tokens_between, get_regions, check_span_pair
from .utils import InvalidSpanError, InvalidSpanOrderError, SpanOutsideSentenceError

__version__ = VERSION
