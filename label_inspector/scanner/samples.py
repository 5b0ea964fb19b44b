"""
Built-in sample labels used by the automatic test run (``--testes``).
"""

from typing import List, NamedTuple


class SampleLabel(NamedTuple):
    name: str
    code: str


SAMPLE_LABELS: List[SampleLabel] = [
    # LITORAL
    SampleLabel("LITORAL - SATIN INDONESIA", "000000326022600007400025117100856"),
    SampleLabel("LITORAL - HELANCA LIGHT", "000004170000000012300099887766554"),
    SampleLabel("LITORAL - AIR FLOW SLUB", "000516000000000050000123456789012"),
    # EUROTEXTIL
    SampleLabel("EURO - CREPE AMANDA", "010000000005142100000000000012000010005000000"),
    SampleLabel("EURO - TWO WAY SPAN", "010000000006691030000000000025000010010000000"),
]
