import argparse
import json
from .config import DEFAULT_CONTEXT_SIZE, NEGATIVE_DROP_RATE, DEFAULT_SEED, EVENT_TYPES, PERMISSIVE, TOKENS_MODE
from .utils import SnippetLogger
from .relation_printer import app as main_app


class Args:
    """
        used to hold all parameters
        actual parameters for experiments will be loaded from the user defined json config file
    """
    def __init__(self, **kwargs):
        self.data_dir = "../sample_data"
        self.patients = "0-195"
        self.output_train = "./snippets/train.txt"
        self.output_dev = "./snippets/dev.txt"
        self.context_size = DEFAULT_CONTEXT_SIZE
        self.snippet_mode = TOKENS_MODE
        self.event_types = list(EVENT_TYPES)
        self.drop_rate = NEGATIVE_DROP_RATE
        self.seed = DEFAULT_SEED
        self.span_order_policy = PERMISSIVE
        self.tokenizer = "whitespace"
        self.log_file = None
        self.log_lvl = "i"
        self.progress_bar = False

        self.__update_args(**kwargs)

    def __update_args(self, **kwargs):
        for k, v in kwargs.items():
            setattr(self, k, v)

    def __repr__(self):
        return repr(self.__dict__)


def json2args(jsondata):
    return Args(**jsondata)


def load_args(config_json):
    with open(config_json, "r") as f:
        configs = json.load(f, object_hook=json2args)

    configs.logger = SnippetLogger(logger_file=configs.log_file, logger_level=configs.log_lvl).get_logger()
    return configs


def app(gargs):
    return main_app(gargs)


def main():
    parser = argparse.ArgumentParser()
    # parse arguments
    parser.add_argument("--config_json", default="./config.json", type=str, required=True,
                        help="json file for snippet printing configurations")
    args = parser.parse_args()

    app(load_args(args.config_json))


if __name__ == '__main__':
    main()
