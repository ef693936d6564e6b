"""
codon_table.py - 표준 유전 암호표
RNA 코돈(A/C/G/U 세 글자) -> 아미노산 한 글자, 종결 코돈은 '*'

모듈 로드 시 한 번만 만들어지고 이후 읽기 전용으로 공유된다.
"""

from types import MappingProxyType
from typing import Dict, List, Mapping, Tuple

STOP_SYMBOL = '*'
UNKNOWN_SYMBOL = '?'
CODON_SIZE = 3

RNA_BASES = ('U', 'C', 'A', 'G')

# 표준 유전 암호 (순서 유지: 출제 시 코돈 목록의 순서가 됨)
_STANDARD_CODE: Dict[str, str] = {
    'UUU': 'F', 'UUC': 'F', 'UUA': 'L', 'UUG': 'L', 'CUU': 'L', 'CUC': 'L', 'CUA': 'L', 'CUG': 'L',
    'AUU': 'I', 'AUC': 'I', 'AUA': 'I', 'AUG': 'M', 'GUU': 'V', 'GUC': 'V', 'GUA': 'V', 'GUG': 'V',
    'UCU': 'S', 'UCC': 'S', 'UCA': 'S', 'UCG': 'S', 'CCU': 'P', 'CCC': 'P', 'CCA': 'P', 'CCG': 'P',
    'ACU': 'T', 'ACC': 'T', 'ACA': 'T', 'ACG': 'T', 'GCU': 'A', 'GCC': 'A', 'GCA': 'A', 'GCG': 'A',
    'UAU': 'Y', 'UAC': 'Y', 'UAA': '*', 'UAG': '*', 'CAU': 'H', 'CAC': 'H', 'CAA': 'Q', 'CAG': 'Q',
    'AAU': 'N', 'AAC': 'N', 'AAA': 'K', 'AAG': 'K', 'GAU': 'D', 'GAC': 'D', 'GAA': 'E', 'GAG': 'E',
    'UGU': 'C', 'UGC': 'C', 'UGA': '*', 'UGG': 'W', 'CGU': 'R', 'CGC': 'R', 'CGA': 'R', 'CGG': 'R',
    'AGU': 'S', 'AGC': 'S', 'AGA': 'R', 'AGG': 'R', 'GGU': 'G', 'GGC': 'G', 'GGA': 'G', 'GGG': 'G',
}

CODON_TABLE: Mapping[str, str] = MappingProxyType(_STANDARD_CODE)

# 아미노산 이름 (표시용)
AMINO_ACID_NAMES: Mapping[str, str] = MappingProxyType({
    'A': 'Alanine', 'C': 'Cysteine', 'D': 'Aspartic acid', 'E': 'Glutamic acid',
    'F': 'Phenylalanine', 'G': 'Glycine', 'H': 'Histidine', 'I': 'Isoleucine',
    'K': 'Lysine', 'L': 'Leucine', 'M': 'Methionine', 'N': 'Asparagine',
    'P': 'Proline', 'Q': 'Glutamine', 'R': 'Arginine', 'S': 'Serine',
    'T': 'Threonine', 'V': 'Valine', 'W': 'Tryptophan', 'Y': 'Tyrosine',
    '*': 'Stop',
})


def _build_reverse_index(table: Mapping[str, str]) -> Tuple[
    Tuple[str, ...], Tuple[str, ...], Mapping[str, Tuple[str, ...]]
]:
    """종결 코돈을 뺀 코돈 목록, 아미노산 목록(정렬), 아미노산 -> 코돈 역색인"""
    codons = tuple(c for c, aa in table.items() if aa != STOP_SYMBOL)
    amino_acids = tuple(sorted({table[c] for c in codons}))

    index: Dict[str, List[str]] = {aa: [] for aa in amino_acids}
    for codon in codons:
        index[table[codon]].append(codon)

    return codons, amino_acids, MappingProxyType(
        {aa: tuple(cs) for aa, cs in index.items()}
    )


CODONS_NO_STOP, AMINO_ACIDS_NO_STOP, AA_TO_CODONS = _build_reverse_index(CODON_TABLE)

STOP_CODONS: Tuple[str, ...] = tuple(
    c for c, aa in CODON_TABLE.items() if aa == STOP_SYMBOL
)


def lookup(codon: str) -> str:
    """코돈 하나를 아미노산으로. 표에 없으면 '?'"""
    return CODON_TABLE.get(codon, UNKNOWN_SYMBOL)


def codons_for(amino_acid: str) -> Tuple[str, ...]:
    """아미노산을 암호화하는 코돈들 (종결 제외, 없으면 빈 튜플)"""
    return AA_TO_CODONS.get(amino_acid, ())
