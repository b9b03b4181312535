"""
Modality-specific file signatures
"""
from typing import Dict, List


# Generic tags for modalities that are not fingerprinted by columns
GENERIC_FILE_TYPES: Dict[str, str] = {
    'clinical': 'clinical-generic',
    'neuropsychological': 'neuropsychological-generic',
}

# Wearable sub-types, checked in order; names are lowercase
WEARABLE_SIGNATURES: Dict[str, List[str]] = {
    'wearable-fitbit': [
        'id', 'num_jour', 'date_jour', 'heure_endor', 'duree_sommeil', 'score_sommeil'
    ],
    'wearable-questionnaire': [
        'identification.id', 'age', 'sex', 'height', 'weight', 'shaps_q1', 'isi_q1'
    ],
}

WEARABLE_UNKNOWN = 'wearable-unknown'
UNKNOWN_FILE_TYPE = 'unknown'
