"""
Print gold standard event-event relations and their context

For every sentence, each pair of event mentions (in text order) becomes one line:
    contains|patient <e1> took </e1> <e2> aspirin </e2> for
label is
    contains    mention1 CONTAINS mention2
    contains-1  mention2 CONTAINS mention1
    none        no CONTAINS relation between them
"""
import numpy as np
from tqdm import tqdm
from .config import (ARG1_TAG, ARG2_TAG, CONTAINS_CATEGORY, CONTAINS_LABEL, CONTAINS_REVERSE_LABEL,
                     NON_RELATION_TAG, SNIPPET_TEMPLATE, REGIONS_MODE, SNIPPET_MODES)
from .data_utils import get_tokens_between, get_regions
from .data_processing.brat import read_document
from .data_processing.io_utils import append_lines
from .data_processing.tokenization import nltk_tokenization_engine
from .utils import SnippetLogger


class RelationSnippetPrinter(object):

    def __init__(self, args, is_training, output_file):
        super().__init__()

        if args.snippet_mode not in SNIPPET_MODES:
            raise ValueError("expect snippet_mode to be one of {} but get {}".format(
                sorted(SNIPPET_MODES), args.snippet_mode))

        self.args = args
        self.is_training = is_training
        self.output_file = output_file
        self.logger = getattr(args, "logger", None) or SnippetLogger(logger_level=args.log_lvl).get_logger()
        # one coin per printer so that negative sampling is reproducible for a given seed
        self.coin = np.random.RandomState(args.seed)

    def __str__(self):
        return "training: {}; output: {}; mode: {}; context size: {}".format(
            self.is_training, self.output_file, self.args.snippet_mode, self.args.context_size)

    def run(self, ann_files):
        """process all the notes and append their snippets to the output file"""
        total = 0
        with tqdm(ann_files, desc="Note", disable=not self.args.progress_bar) as doc_iter:
            for ann_file in doc_iter:
                total += self.process(read_document(ann_file))
        self.logger.info("{} snippets from {} notes written to {}".format(total, len(ann_files), self.output_file))

        return total

    def process(self, document):
        sentences, tokens = nltk_tokenization_engine(document.text, tokenizer_type=self.args.tokenizer)

        # a lookup from pair of argument ids to relation
        relation_lookup = {(rel.arg1, rel.arg2): rel for rel in document.relations}
        mentions = sorted(document.entities_of_types(self.args.event_types), key=lambda x: (x.start, x.end))

        total = 0
        for sentence in sentences:
            mentions_in_sentence = [m for m in mentions if sentence.covers(m)]
            lines = self.process_sentence(document, tokens, sentence, mentions_in_sentence, relation_lookup)
            if lines:
                append_lines(lines, self.output_file)
            total += len(lines)
        self.logger.debug("{}: {} sentences; {} snippets".format(document.doc_id, len(sentences), total))

        return total

    def process_sentence(self, document, tokens, sentence, mentions, relation_lookup):
        lines = []
        for i in range(len(mentions)):
            for j in range(i + 1, len(mentions)):
                mention1, mention2 = mentions[i], mentions[j]
                label = self.get_label(mention1, mention2, relation_lookup)

                # drop some portion of negative examples during training
                if self.is_training and label == NON_RELATION_TAG and self.coin.random_sample() <= self.args.drop_rate:
                    continue

                context = self.get_context(document, tokens, sentence, mention1, mention2)
                lines.append(SNIPPET_TEMPLATE.format(label, context).lower())

        return lines

    @staticmethod
    def get_label(mention1, mention2, relation_lookup):
        forward_relation = relation_lookup.get((mention1.id, mention2.id))
        reverse_relation = relation_lookup.get((mention2.id, mention1.id))

        label = NON_RELATION_TAG
        if forward_relation is not None:
            if forward_relation.category == CONTAINS_CATEGORY:
                label = CONTAINS_LABEL
        elif reverse_relation is not None:
            if reverse_relation.category == CONTAINS_CATEGORY:
                label = CONTAINS_REVERSE_LABEL

        return label

    def get_context(self, document, tokens, sentence, mention1, mention2):
        left, right = mention1.to_span(ARG1_TAG), mention2.to_span(ARG2_TAG)

        if self.args.snippet_mode == REGIONS_MODE:
            return get_regions(tokens, sentence, left, right, self.args.context_size,
                               policy=self.args.span_order_policy)

        return get_tokens_between(tokens, sentence.start, sentence.end, left, ARG1_TAG, right, ARG2_TAG,
                                  self.args.context_size, text=document.text, policy=self.args.span_order_policy)
