"""End-to-end tests for the two-pass pipeline."""

from __future__ import annotations

import textwrap

import pytest

from hackasm import assemble, assemble_program
from hackasm.codegen import format_word
from hackasm.errors import (
    AlreadyBound,
    AssemblerError,
    InvalidAddress,
    TableLookupMiss,
    UnknownInstruction,
)
from hackasm.instruction import AddressLoad, Compute

MAX_ASM = """
// Computes R2 = max(R0, R1)
   @R0
   D=M              // D = first number
   @R1
   D=D-M            // D = first number - second number
   @OUTPUT_FIRST
   D;JGT            // if D>0 goto output_first
   @R1
   D=M              // D = second number
   @OUTPUT_D
   0;JMP            // goto output_d
(OUTPUT_FIRST)
   @R0
   D=M              // D = first number
(OUTPUT_D)
   @R2
   M=D              // M[2] = D (greatest number)
(INFINITE_LOOP)
   @INFINITE_LOOP
   0;JMP            // infinite loop
"""

MAX_HACK = """
0000000000000000
1111110000010000
0000000000000001
1111010011010000
0000000000001010
1110001100000001
0000000000000001
1111110000010000
0000000000001100
1110101010000111
0000000000000000
1111110000010000
0000000000000010
1110001100001000
0000000000001110
1110101010000111
"""

SUM_ASM = """
    @i
    M=1     // i = 1
    @sum
    M=0     // sum = 0
(LOOP)
    @i
    D=M
    @100
    D=D-A
    @END
    D;JGT
    @END
    0;JMP
(END)
    @END
    0;JMP
"""


def _words(binary_text: str) -> list[int]:
    return [int(line, 2) for line in binary_text.split()]


def test_max_program():
    assert assemble(MAX_ASM) == _words(MAX_HACK)


def test_variables_allocated_from_sixteen():
    program = assemble_program(SUM_ASM)
    assert program.words[0] == 16
    assert program.words[2] == 17
    assert program.words[4] == 16
    assert program.words[6] == 100
    assert program.words[8] == 12
    assert program.symbols.variables() == {"i": 16, "sum": 17}
    assert program.symbols.labels() == {"LOOP": 4, "END": 12}


def test_forward_label_reference_is_not_a_variable():
    program = assemble_program("@END\n0;JMP\n(END)\n@x\n")
    assert program.words[0] == 2
    assert program.words[2] == 16
    assert program.symbols.variables() == {"x": 16}


def test_labels_and_blank_lines_take_no_address():
    program = assemble_program("(a)\nD=A\n\n  // note\n(b)\n(c)\n@b\n@c\n")
    assert program.words == [0xEC10, 1, 1]


def test_empty_source_yields_no_words():
    assert assemble("") == []
    assert assemble("// nothing\n\n") == []


def test_output_words_fit_sixteen_bits():
    for word in assemble(MAX_ASM + SUM_ASM.replace("LOOP", "L2").replace("END", "E2")):
        assert 0 <= word <= 0xFFFF
        assert len(format_word(word)) == 16


def test_listing_tracks_lines():
    program = assemble_program("(START)\n@5 // five\nD=A\n")
    labels = [entry for entry in program.listing if entry.is_label]
    insts = [entry for entry in program.listing if not entry.is_label]
    assert [(entry.lineno, entry.text) for entry in labels] == [(1, "(START)")]
    assert [(entry.lineno, entry.address, entry.word) for entry in insts] == [(2, 0, 5), (3, 1, 0xEC10)]
    assert insts[0].instruction == AddressLoad(5)
    assert insts[1].instruction == Compute("A", destination="D")


def test_unknown_instruction_reports_line():
    with pytest.raises(UnknownInstruction) as excinfo:
        assemble("@1\n\nfoo bar!\n@2\n")
    assert excinfo.value.lineno == 3
    assert str(excinfo.value) == "line 3: unknown instruction: foobar!"


def test_invalid_address_reports_line():
    with pytest.raises(InvalidAddress, match="line 2: invalid address: 40000"):
        assemble("// c\n@40000\n")


def test_lookup_miss_reports_field():
    with pytest.raises(TableLookupMiss) as excinfo:
        assemble("@1\nMM=D\n")
    assert excinfo.value.field == "destination"
    assert excinfo.value.mnemonic == "MM"
    assert excinfo.value.lineno == 2


def test_label_colliding_with_predefined_symbol():
    with pytest.raises(AlreadyBound, match="line 1: symbol already bound: SP"):
        assemble("(SP)\n@1\n")


def test_duplicate_label_raises_clear_error():
    source = textwrap.dedent(
        """
        (dup)
            D=A
        (dup)
            D=A
        """
    )
    with pytest.raises(ValueError, match="symbol already bound: dup"):
        assemble(source)


def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        assemble("garbage")
    assert issubclass(AssemblerError, ValueError)


def test_runs_do_not_share_state():
    first = assemble_program("@a\n@b\n")
    second = assemble_program("@b\n")
    assert first.words == [16, 17]
    assert second.words == [16]


def test_spaced_comment_marker():
    assert assemble("D=M / / increment\n") == [0xFC10]
