"""
THYME notes are split into train/dev/test by patient id:
    patient id % 8 in (0, 1, 2, 3) -> train
    patient id % 8 in (4, 5)       -> dev
    patient id % 8 in (6, 7)       -> test
note files are named after the patient, e.g. ID012_clinic_034.ann
"""
from pathlib import Path
from ..config import (PATIENT_SET_MODULUS, TRAIN_REMAINDERS, DEV_REMAINDERS, TEST_REMAINDERS,
                      PATIENT_FILE_PREFIX, BRAT_ANN_EXT)


def parse_integer_ranges(ranges):
    """ '0-3,7,10-11' -> [0, 1, 2, 3, 7, 10, 11] """
    items = []
    for part in ranges.split(","):
        part = part.strip()
        if not part:
            continue
        if "-" in part:
            first, last = part.split("-", 1)
            first, last = int(first), int(last)
            if first > last:
                raise ValueError("invalid patient range {}: start is larger than end".format(part))
            items.extend(range(first, last + 1))
        else:
            items.append(int(part))
    return items


def get_patient_sets(patient_sets, remainders):
    return [each for each in patient_sets if each % PATIENT_SET_MODULUS in remainders]


def get_train_patients(patient_sets):
    return get_patient_sets(patient_sets, TRAIN_REMAINDERS)


def get_dev_patients(patient_sets):
    return get_patient_sets(patient_sets, DEV_REMAINDERS)


def get_test_patients(patient_sets):
    return get_patient_sets(patient_sets, TEST_REMAINDERS)


def get_files_for(patient_ids, data_dir):
    prefixes = tuple(PATIENT_FILE_PREFIX.format(pid) for pid in patient_ids)
    if not prefixes:
        return []
    return sorted(fn for fn in Path(data_dir).glob("*{}".format(BRAT_ANN_EXT)) if fn.name.startswith(prefixes))
