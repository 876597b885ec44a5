"""Static catalog literals, grouped by tier."""

from typing import Any, Dict, List

GENOMIC = "Genomic & Sequence"
PROTEIN = "Protein Structure & Function"
PATHOGENICITY = "Pathogenicity & Virulence"

def _source(database_id: str, name: str, tier: int, category: str, url: str, response_time: int, status: str = "online") -> Dict[str, Any]:
    return {
        "id": database_id,
        "name": name,
        "tier": tier,
        "category": category,
        "url": url,
        "status": status,
        "response_time": response_time,
    }

TIER_1_DATABASES: List[Dict[str, Any]] = [
    _source("ncbi_genbank", "NCBI GenBank", 1, GENOMIC, "https://www.ncbi.nlm.nih.gov/genbank/", 150),
    _source("embl_ena", "EMBL-EBI ENA", 1, GENOMIC, "https://www.ebi.ac.uk/ena/", 200),
    _source("refseq", "RefSeq", 1, GENOMIC, "https://www.ncbi.nlm.nih.gov/refseq/", 120),
    _source("uniparc", "UniParc", 1, GENOMIC, "https://www.uniprot.org/uniparc/", 180),
    _source("insdc", "INSDC", 1, GENOMIC, "https://www.insdc.org/", 250),
    _source("silva", "SILVA", 1, GENOMIC, "https://www.arb-silva.de/", 300),
    _source("rdp", "RDP", 1, GENOMIC, "https://rdp.cme.msu.edu/", 280),
    _source("greengenes", "Greengenes", 1, GENOMIC, "https://greengenes.secondgenome.com/", 320),
    _source("gtdb", "GTDB", 1, GENOMIC, "https://gtdb.ecogenomic.org/", 220),
    _source("img_m", "IMG/M", 1, GENOMIC, "https://img.jgi.doe.gov/", 400),
]

TIER_2_DATABASES: List[Dict[str, Any]] = [
    _source("pdb", "PDB", 2, PROTEIN, "https://www.rcsb.org/", 100),
    _source("wwpdb", "wwPDB", 2, PROTEIN, "https://www.wwpdb.org/", 150),
    _source("pdbe", "PDBe", 2, PROTEIN, "https://www.ebi.ac.uk/pdbe/", 130),
    _source("rcsb_pdb", "RCSB PDB", 2, PROTEIN, "https://www.rcsb.org/", 120),
    _source("pdbj", "PDBj", 2, PROTEIN, "https://pdbj.org/", 200),
    _source("scop", "SCOP", 2, PROTEIN, "https://scop.mrc-lmb.cam.ac.uk/", 250),
    _source("cath", "CATH", 2, PROTEIN, "https://www.cathdb.info/", 180),
    _source("pfam", "Pfam", 2, PROTEIN, "https://pfam.xfam.org/", 160),
    _source("interpro", "InterPro", 2, PROTEIN, "https://www.ebi.ac.uk/interpro/", 140),
    _source("prosite", "PROSITE", 2, PROTEIN, "https://prosite.expasy.org/", 190),
]

TIER_3_DATABASES: List[Dict[str, Any]] = [
    _source("vfdb", "VFDB", 3, PATHOGENICITY, "http://www.mgc.ac.cn/VFs/", 300),
    _source("mvirdb", "MvirDB", 3, PATHOGENICITY, "http://mvirdb.llnl.gov/", 350),
    _source("patric_vf", "PATRIC VF", 3, PATHOGENICITY, "https://www.patricbrc.org/", 280),
    _source("phi_base", "PHI-base", 3, PATHOGENICITY, "http://www.phi-base.org/", 320),
    _source("phidias", "PHIDIAS", 3, PATHOGENICITY, "https://www.phidias.us/", 400),
]

ALL_DATABASES: List[Dict[str, Any]] = TIER_1_DATABASES + TIER_2_DATABASES + TIER_3_DATABASES
