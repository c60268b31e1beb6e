import argparse
import traceback
from pathlib import Path
from .config import (DEFAULT_CONTEXT_SIZE, NEGATIVE_DROP_RATE, DEFAULT_SEED, EVENT_TYPES, PERMISSIVE,
                     SPAN_ORDER_POLICIES, TOKENS_MODE, SNIPPET_MODES, ARGS_FILE_NAME)
from .printer import RelationSnippetPrinter
from .utils import SnippetLogger
from .data_processing.io_utils import recreate_file, save_json
from .data_processing.splits import parse_integer_ranges, get_train_patients, get_dev_patients, get_files_for


def check_args(args):
    if args.context_size < 0:
        raise RuntimeError("context_size should be non-negative but get {}.".format(args.context_size))

    if not 0.0 <= args.drop_rate <= 1.0:
        raise RuntimeError("drop_rate should be in [0, 1] but get {}.".format(args.drop_rate))

    if Path(args.output_train).resolve() == Path(args.output_dev).resolve():
        raise RuntimeError("train and dev output should be different files but both are {}.".format(
            args.output_train))

    if not Path(args.data_dir).is_dir():
        raise RuntimeError("{} is not a directory.".format(args.data_dir))


def save_args(args):
    # the logger is not serializable
    to_save = {k: v for k, v in vars(args).items() if k != "logger"}
    to_save["event_types"] = list(to_save["event_types"])
    save_json(to_save, Path(args.output_train).parent / ARGS_FILE_NAME)


def app(gargs):
    check_args(gargs)

    train_file = recreate_file(gargs.output_train)
    dev_file = recreate_file(gargs.output_dev)
    save_args(gargs)

    patient_sets = parse_integer_ranges(gargs.patients)
    train_files = get_files_for(get_train_patients(patient_sets), gargs.data_dir)
    dev_files = get_files_for(get_dev_patients(patient_sets), gargs.data_dir)
    gargs.logger.info("train notes: {}; dev notes: {}".format(len(train_files), len(dev_files)))

    totals = []
    for is_training, files, output_file in ((True, train_files, train_file), (False, dev_files, dev_file)):
        printer = RelationSnippetPrinter(gargs, is_training=is_training, output_file=output_file)
        gargs.logger.info("printer info: {}".format(printer))
        try:
            totals.append(printer.run(files))
        except Exception as ex:
            gargs.logger.error("Printing error:\n{}".format(traceback.format_exc()))
            raise RuntimeError("failed to write snippets to {}".format(output_file)) from ex

    return tuple(totals)


def argparser(args=None):
    parser = argparse.ArgumentParser()
    # parse arguments
    parser.add_argument("--data_dir", type=str, required=True,
                        help="The directory of annotated notes (brat .txt and .ann pairs named ID<patient>_*)")
    parser.add_argument("--patients", type=str, required=True,
                        help="patient sets as integer ranges, e.g. 0-195 or 0-3,7")
    parser.add_argument("--output_train", type=str, required=True,
                        help="output file for training snippets (recreated on each run)")
    parser.add_argument("--output_dev", type=str, required=True,
                        help="output file for dev snippets (recreated on each run)")
    parser.add_argument("--context_size", default=DEFAULT_CONTEXT_SIZE, type=int,
                        help="number of tokens to include on the left of arg1 and on the right of arg2")
    parser.add_argument("--snippet_mode", default=TOKENS_MODE, type=str, choices=sorted(SNIPPET_MODES),
                        help="tokens: ctx <e1> arg1 </e1> between <e2> arg2 </e2> ctx; "
                             "regions: ctx arg1|between|arg2 ctx")
    parser.add_argument("--event_types", default=list(EVENT_TYPES), type=str, nargs='+',
                        help="entity types treated as event mentions")
    parser.add_argument("--drop_rate", default=NEGATIVE_DROP_RATE, type=float,
                        help="probability of dropping a negative (none) pair during training")
    parser.add_argument("--seed", default=DEFAULT_SEED, type=int,
                        help='random seed for negative down-sampling')
    parser.add_argument("--span_order_policy", default=PERMISSIVE, type=str, choices=sorted(SPAN_ORDER_POLICIES),
                        help="permissive: log malformed mention pairs and continue; strict: fail on them")
    parser.add_argument("--tokenizer", default="whitespace", type=str, choices=["whitespace", "wordpunct"],
                        help="nltk word tokenizer used inside sentences")
    parser.add_argument("--log_file", default=None,
                        help="where to save the log information")
    parser.add_argument("--log_lvl", default="i", type=str,
                        help="d=DEBUG; i=INFO; w=WARNING; e=ERROR")
    parser.add_argument("--progress_bar", action='store_true',
                        help="show progress over notes in tqdm")

    if args is None:
        parsed_args = parser.parse_args()
    else:
        parsed_args = parser.parse_args(args)

    parsed_args.logger = SnippetLogger(logger_file=parsed_args.log_file, logger_level=parsed_args.log_lvl).get_logger()

    return parsed_args


def main():
    app(argparser())


if __name__ == '__main__':
    main()
