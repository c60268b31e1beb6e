"""
Read BRAT standoff annotations

Each note is a pair of files sharing a stem:
    ID001_clinic_001.txt  the raw text
    ID001_clinic_001.ann  the annotations

We only use text-bound entities and binary relations:
    T1	EVENT 12 16	took
    T2	EVENT 86 92;93 97	chest pain
    R1	CONTAINS Arg1:T1 Arg2:T2
discontinuous entities are collapsed to (min start, max end);
any other annotation line (attributes, events, notes, comments) is skipped
"""
from collections import namedtuple
from pathlib import Path
from .io_utils import load_text
from ..config import BRAT_TEXT_EXT, BRAT_ANN_EXT
from ..data_utils import Span


class Entity(namedtuple("Entity", ["id", "type", "start", "end", "text"])):
    __slots__ = ()

    def to_span(self, label=None):
        return Span(self.start, self.end, label=label, text=self.text)


Relation = namedtuple("Relation", ["id", "category", "arg1", "arg2"])


class BratDocument(object):
    """A single annotated note."""

    def __init__(self, doc_id, text, entities=None, relations=None):
        self.doc_id = doc_id
        self.text = text
        self.entities = entities if entities else dict()
        self.relations = relations if relations else []

    def __str__(self):
        return "doc_id={}; entities={}; relations={}".format(
            self.doc_id, len(self.entities), len(self.relations))

    def entities_of_types(self, entity_types):
        entity_types = set(entity_types)
        return [en for en in self.entities.values() if en.type in entity_types]


def _parse_entity(info, ann_file, line_idx):
    try:
        en_id, type_offsets = info[0], info[1]
        en_type, offsets = type_offsets.split(" ", 1)
        starts, ends = [], []
        for fragment in offsets.split(";"):
            s, e = fragment.split()
            starts.append(int(s))
            ends.append(int(e))
    except ValueError as ex:
        raise ValueError("malformed entity in {} at line {}: {}".format(ann_file, line_idx + 1, "\t".join(info))) \
            from ex
    en_text = info[2] if len(info) > 2 else None
    return Entity(en_id, en_type, min(starts), max(ends), en_text)


def _parse_relation(info, ann_file, line_idx):
    try:
        rel_id = info[0]
        category, arg1, arg2 = info[1].split()
        arg1 = arg1.split(":", 1)[1]
        arg2 = arg2.split(":", 1)[1]
    except (ValueError, IndexError) as ex:
        raise ValueError("malformed relation in {} at line {}: {}".format(ann_file, line_idx + 1, "\t".join(info))) \
            from ex
    return Relation(rel_id, category, arg1, arg2)


def parse_ann(ann_text, ann_file="<string>"):
    entities = dict()
    relations = []

    for idx, line in enumerate(ann_text.split("\n")):
        line = line.rstrip("\r")
        if not line.strip():
            continue
        info = line.split("\t")
        if line.startswith("T"):
            entity = _parse_entity(info, ann_file, idx)
            entities[entity.id] = entity
        elif line.startswith("R"):
            relations.append(_parse_relation(info, ann_file, idx))

    return entities, relations


def read_document(ann_file):
    ann_file = Path(ann_file)
    txt_file = ann_file.with_suffix(BRAT_TEXT_EXT)
    if not txt_file.exists():
        raise FileNotFoundError("cannot find the text file {} for annotation {}".format(txt_file, ann_file))

    entities, relations = parse_ann(load_text(ann_file), ann_file)

    return BratDocument(ann_file.stem, load_text(txt_file), entities, relations)


def list_ann_files(data_dir):
    return sorted(Path(data_dir).glob("*{}".format(BRAT_ANN_EXT)))
