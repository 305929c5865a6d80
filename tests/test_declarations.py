# tests/test_declarations.py
import dataclasses

import pytest
from solders.pubkey import Pubkey
from solders.system_program import ID as SYSTEM_PROGRAM_ID

from static_ids.core.declarations import StaticId, StaticPda, declare_id, declare_pda
from static_ids.core.exceptions import DerivationMismatchError, WrongLengthError

PUMP_PROGRAM_ID = "6EF8rrecthR5Dkzon8Nwu78hRvfCKubJ14M5uBEwF6P"
PUMP_GLOBAL = "4wTV1YmiEkRvAtNtsSGPtUrqRYQMe5SKy2uB4Jjaxnjf"


def test_declare_id_from_literal():
    program = declare_id(PUMP_PROGRAM_ID)

    assert isinstance(program, StaticId)
    assert program.ID == Pubkey.from_string(PUMP_PROGRAM_ID)
    assert program.id() == program.ID
    assert program.check_id(program.id())
    assert not program.check_id(SYSTEM_PROGRAM_ID)


def test_declare_id_accepts_existing_pubkey():
    program = declare_id(SYSTEM_PROGRAM_ID)

    assert program.ID is SYSTEM_PROGRAM_ID


def test_declare_id_rejects_bad_literal():
    with pytest.raises(WrongLengthError):
        declare_id("1")


def test_declare_pda():
    global_state = declare_pda(PUMP_GLOBAL, PUMP_PROGRAM_ID, "global")

    assert isinstance(global_state, StaticPda)
    assert str(global_state.ID) == PUMP_GLOBAL
    assert global_state.BUMP == 255
    assert global_state.check_id(Pubkey.from_string(PUMP_GLOBAL))


def test_declare_pda_never_patches_a_mismatch():
    with pytest.raises(DerivationMismatchError):
        declare_pda(PUMP_GLOBAL, PUMP_PROGRAM_ID, "eventAuthority")


def test_declarations_are_frozen():
    program = declare_id(PUMP_PROGRAM_ID)

    with pytest.raises(dataclasses.FrozenInstanceError):
        program.ID = SYSTEM_PROGRAM_ID
