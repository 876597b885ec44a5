from molecular_db.models.query import (
    AnnotationType, DatabaseAnnotation, AnnotationSearchRequest, AnnotationSearchResponse
)
from molecular_db.utils.helpers import logger

# Every accession gets this annotation
DEFAULT_PATHWAY_ANNOTATION = DatabaseAnnotation(
    type=AnnotationType.PATHWAY,
    source="KEGG",
    value="Metabolic pathway: purine biosynthesis",
    confidence=0.75,
    evidence=["computational prediction"],
)


class AnnotationService:
    """Simulated annotation lookup keyed on accession patterns"""

    def search_annotations(self, request: AnnotationSearchRequest) -> AnnotationSearchResponse:
        """
        Return mock annotations for an accession.

        - RefSeq protein accessions (``NP_``) get a transcriptional regulator function
        - accessions mentioning ``toxin`` or ``virulence`` get a VFDB virulence factor
        - every accession gets a KEGG pathway annotation

        ``request.databases`` is accepted but does not narrow the lookup.
        """
        annotations = []
        accession = request.accession

        if accession.startswith("NP_"):
            annotations.append(DatabaseAnnotation(
                type=AnnotationType.FUNCTION,
                source="NCBI RefSeq",
                value="DNA-binding transcriptional regulator",
                confidence=0.95,
                evidence=["experimental", "sequence similarity"],
            ))

        if "toxin" in accession or "virulence" in accession:
            annotations.append(DatabaseAnnotation(
                type=AnnotationType.FUNCTION,
                source="VFDB",
                value="Virulence factor",
                confidence=0.88,
                evidence=["experimental", "literature"],
            ))

        annotations.append(DEFAULT_PATHWAY_ANNOTATION.model_copy(deep=True))

        logger.info(f"Found {len(annotations)} annotations for accession {accession}")
        return AnnotationSearchResponse(annotations=annotations)
