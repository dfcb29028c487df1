"""Hand-off from recommended specialties to the provider search."""

import logging
from typing import Dict, Iterable, List
from urllib.parse import quote

from .contracts import SpecialtyReferral

logger = logging.getLogger(__name__)

# Specialty vocabulary understood by the provider search.
SPECIALTY_DIRECTORY: Dict[str, str] = {
    "Cardiology": "Deals with disorders of the heart and cardiovascular system",
    "Neurology": "Deals with disorders of the nervous system",
    "Orthopedics": "Deals with conditions involving the musculoskeletal system",
    "Pediatrics": "Deals with the medical care of infants, children, and adolescents",
    "Oncology": "Deals with the prevention, diagnosis, and treatment of cancer",
    "Dermatology": "Deals with the skin and its diseases",
    "Ophthalmology": "Deals with the anatomy, physiology and diseases of the eye",
    "Gynecology": "Deals with the health of the female reproductive system",
    "Urology": "Deals with diseases of the urinary tract and the male reproductive system",
    "Psychiatry": "Deals with the diagnosis, prevention, and treatment of mental disorders",
}

_DIRECTORY_BY_LOWER = {name.lower(): name for name in SPECIALTY_DIRECTORY}


def specialty_search_path(specialty: str) -> str:
    return f"/?specialty={quote(specialty, safe='')}"


def is_listed(specialty: str) -> bool:
    return specialty.strip().lower() in _DIRECTORY_BY_LOWER


def build_referrals(specialties: Iterable[str]) -> List[SpecialtyReferral]:
    """Pair each specialty with its search link, keeping names the directory lacks.

    Unlisted names still get a link (the search matches on free text), but a
    warning is logged since they may return nothing.
    """

    referrals: List[SpecialtyReferral] = []
    for specialty in specialties:
        canonical = _DIRECTORY_BY_LOWER.get(specialty.strip().lower())
        if canonical is None:
            logger.warning("Specialty %r is not in the provider search directory", specialty)
        referrals.append(
            SpecialtyReferral(
                name=specialty,
                search_path=specialty_search_path(specialty),
                listed=canonical is not None,
                description=SPECIALTY_DIRECTORY[canonical] if canonical else "",
            )
        )
    return referrals
