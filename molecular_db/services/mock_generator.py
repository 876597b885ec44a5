"""
Synthetic match generation for simulated database queries.

Nothing here is derived from real biological data: every score, accession and
annotation is drawn from a random generator so the API can return plausible
looking ranked results.
"""
import numpy as np
from typing import Dict, List, Optional
from molecular_db.core.config import settings
from molecular_db.models.database import DataSource
from molecular_db.models.query import AnnotationType, DatabaseAnnotation, DatabaseMatch, DatabaseQuery
from molecular_db.repositories.catalog_data import GENOMIC, PATHOGENICITY, PROTEIN

ACCESSION_PREFIXES: Dict[str, str] = {
    "ncbi_genbank": "GB",
    "embl_ena": "EM",
    "refseq": "NP",
    "pdb": "PDB",
    "pfam": "PF",
    "vfdb": "VF",
}
DEFAULT_ACCESSION_PREFIX = "DB"
ACCESSION_ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"
ACCESSION_SUFFIX_LENGTH = 8

DESCRIPTIONS: Dict[str, List[str]] = {
    GENOMIC: [
        "Hypothetical protein",
        "DNA polymerase",
        "RNA polymerase subunit",
        "Ribosomal protein",
        "Metabolic enzyme",
    ],
    PROTEIN: [
        "Alpha/beta hydrolase fold",
        "Immunoglobulin-like domain",
        "Helix-turn-helix motif",
        "Zinc finger domain",
        "Leucine zipper",
    ],
    PATHOGENICITY: [
        "Type III secretion system effector",
        "Adhesin protein",
        "Toxin component",
        "Virulence regulator",
        "Invasion protein",
    ],
}

ORGANISMS: List[str] = [
    "Escherichia coli",
    "Saccharomyces cerevisiae",
    "Homo sapiens",
    "Mus musculus",
    "Drosophila melanogaster",
    "Caenorhabditis elegans",
    "Arabidopsis thaliana",
    "Bacillus subtilis",
]

MAX_MATCHES = 10


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Create the random source for one request.

    An explicit seed wins over the process-wide MOCK_RANDOM_SEED; with neither
    the generator is seeded from OS entropy and output is not reproducible.
    """
    if seed is None:
        seed = settings.MOCK_RANDOM_SEED
    return np.random.default_rng(seed)


class MockMatchGenerator:
    """Produces ranked pseudo-matches for a database and query"""

    def __init__(self, rng: Optional[np.random.Generator] = None):
        self.rng = rng if rng is not None else make_rng()

    def generate(self, source: DataSource, query: DatabaseQuery) -> List[DatabaseMatch]:
        """Generate 1-10 matches for `source`, sorted by descending score.

        The query descriptor is accepted for parity with real backends; the
        simulated results do not depend on it.
        """
        num_matches = int(self.rng.integers(1, MAX_MATCHES + 1))
        matches = []
        for i in range(num_matches):
            score = float(self.rng.random() * 1000)
            identity = float(0.5 + self.rng.random() * 0.5)
            e_value = float(10 ** (-self.rng.random() * 20))
            matches.append(DatabaseMatch(
                id=f"{source.id}_{i + 1}",
                accession=self._accession(source),
                description=self._description(source),
                organism=self._pick(ORGANISMS),
                score=score,
                e_value=e_value,
                identity=identity,
                coverage=float(0.6 + self.rng.random() * 0.4),
                alignment_length=int(self.rng.integers(100, 600)),
                annotations=self._annotations(source),
            ))

        matches.sort(key=lambda match: match.score, reverse=True)
        return matches

    def _pick(self, pool: List[str]) -> str:
        return pool[int(self.rng.integers(len(pool)))]

    def _accession(self, source: DataSource) -> str:
        prefix = ACCESSION_PREFIXES.get(source.id, DEFAULT_ACCESSION_PREFIX)
        indices = self.rng.integers(len(ACCESSION_ALPHABET), size=ACCESSION_SUFFIX_LENGTH)
        suffix = "".join(ACCESSION_ALPHABET[int(i)] for i in indices)
        return f"{prefix}_{suffix}"

    def _description(self, source: DataSource) -> str:
        return self._pick(DESCRIPTIONS.get(source.category, DESCRIPTIONS[GENOMIC]))

    def _annotations(self, source: DataSource) -> List[DatabaseAnnotation]:
        annotations = []

        if self.rng.random() > 0.3:
            annotations.append(DatabaseAnnotation(
                type=AnnotationType.FUNCTION,
                source=source.name,
                value="Catalytic activity",
                confidence=float(0.8 + self.rng.random() * 0.2),
                evidence=["sequence similarity", "domain analysis"],
            ))

        if self.rng.random() > 0.7:
            annotations.append(DatabaseAnnotation(
                type=AnnotationType.PATHWAY,
                source="KEGG",
                value="Central metabolism",
                confidence=float(0.6 + self.rng.random() * 0.3),
                evidence=["pathway analysis"],
            ))

        return annotations
