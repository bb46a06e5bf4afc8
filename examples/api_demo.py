#!/usr/bin/env python3
"""
seqscan API demo

Shows lazy iteration, indexing and parallel symbol counting on small
FASTA and FASTQ files
"""

import os
import sys
import tempfile

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from seqscan import count_symbols, index, iterate, render, summarize

FASTA = b""">SEQUENCE_1
MTEITAAMVKELRESTGAGMMDCKNALSETNGDFDKAVQLLREKGLGKAAKKADRLAAEG
LVSVKVSDDFTIAAMRPSYLSYEDLDMTFVENEYKALVAELEKENEERRRLKDPNKPEHK
>SEQUENCE_2
SATVSEINSETDFVAKNDQFIALTKDTTAHIQSNSLQSVEELHSSTINGVKFEEYLKSQI
"""

FASTQ = b"""@read1 lane=1
ACGTACGTTT
+
IIIIIHHH##
@read2
acgtNN
+read2
@@@+++
"""


def demo_iteration(path):
    """Iterate over records without building a list"""
    print("=== Lazy iteration ===\n")
    for number, section in iterate(path):
        print(f"Record {number}: {section.header}, {section.sequence_length} residues")
    print()


def demo_index(path):
    """Filter records, then address them by position"""
    print("=== Indexing ===\n")
    sections = index(path, lambda s: s.sequence_length >= 8)
    print(f"Reads with at least 8 bases: {len(sections)}")
    for section in sections:
        record = section.to_record()
        print(render(record), end="")
        print(f"  Phred scores: {record.phred_scores().tolist()}")
    print()


def demo_counting(fasta_path, fastq_path):
    """Count symbols over indexed records"""
    print("=== Symbol counting ===\n")
    counts = count_symbols(index(fasta_path), n_workers=2)
    print(f"Protein residues: {counts.total}")
    print(f"Most common: {counts.most_common(3)}")

    summary = summarize(fastq_path, n_workers=2)
    print(f"Reads: {summary.num_records}, average length: {summary.average_length:.1f}")
    print(f"GC fraction: {summary.symbol_counts.fraction('GC'):.2f}")
    print(summary.symbol_counts.to_df().to_string(index=False))


def main():
    with tempfile.TemporaryDirectory() as tmpdir:
        fasta_path = os.path.join(tmpdir, "proteins.fasta")
        fastq_path = os.path.join(tmpdir, "reads.fastq")
        with open(fasta_path, "wb") as f:
            f.write(FASTA)
        with open(fastq_path, "wb") as f:
            f.write(FASTQ)

        demo_iteration(fasta_path)
        demo_index(fastq_path)
        demo_counting(fasta_path, fastq_path)


if __name__ == "__main__":
    main()
