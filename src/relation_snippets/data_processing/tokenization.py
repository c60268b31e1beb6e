from nltk.tokenize import WhitespaceTokenizer, WordPunctTokenizer
from nltk.tokenize.punkt import PunktSentenceTokenizer
from ..data_utils import Span, Token


TOKENIZERS = {
    "whitespace": WhitespaceTokenizer,
    "wordpunct": WordPunctTokenizer
}


def nltk_tokenization_engine(text, tokenizer_type="whitespace"):
    """
     input text
     output:
        sentences: [Span(sent start, sent end)]
        tokens: [Token(char offset start, char offset end, token_text)] for the whole text
        offsets are in the original text
    """
    if tokenizer_type not in TOKENIZERS:
        raise ValueError("expect tokenizer to be one of {} but get {}".format(sorted(TOKENIZERS), tokenizer_type))

    sent_tokenizer = PunktSentenceTokenizer()
    word_tokenizer = TOKENIZERS[tokenizer_type]()

    sentences = []
    tokens = []
    for sent_start, sent_end in sent_tokenizer.span_tokenize(text):
        sent = text[sent_start:sent_end]
        sentences.append(Span(sent_start, sent_end))
        for s, e in word_tokenizer.span_tokenize(sent):
            tokens.append(Token(s + sent_start, e + sent_start, sent[s:e]))

    return sentences, tokens
