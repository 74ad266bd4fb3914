"""Heuristic discovery of function entry points from prologue patterns."""

from __future__ import annotations

import logging

from reilgraph.memory_image import MemoryImage

_log = logging.getLogger(__name__)

_PACSP_MASK, _PACSP = 0xFFFFFFBF, 0xD503233F  # paci[a|b]sp
_SUB_SP_MASK, _SUB_SP = 0xFF0003FF, 0xD10003FF  # sub sp, sp, #imm
_STP_MASK = 0xFF4003E0
_STP_X_SP = 0xA90003E0  # stp x?, x?, [sp, #imm][!]
_STP_D_SP = 0x6D0003E0  # stp d?, d?, [sp, #imm][!]
_ADD_FP_MASK, _ADD_FP = 0xFF0003FF, 0x910003FD  # add x29, sp, #imm


def find_aarch64_functions(memory_image: MemoryImage) -> set[int]:
    """Addresses of likely AArch64 function prologues in executable mappings."""
    results: set[int] = set()

    for mapping in memory_image.mappings():
        if not mapping.executable:
            continue

        data = mapping.data
        start_address = 0
        pacsp = sub = stp = False

        # The final word of a mapping is never examined.
        for offset in range(0, len(data) - 4, 4):
            address = mapping.address + offset
            opcode = int.from_bytes(data[offset : offset + 4], "little")

            if not pacsp and opcode & _PACSP_MASK == _PACSP:
                start_address = address
                pacsp, sub, stp = True, False, False
            elif not sub and opcode & _SUB_SP_MASK == _SUB_SP:
                if not pacsp:
                    start_address = address
                sub, stp = True, False
            elif opcode & _STP_MASK == _STP_X_SP:
                if not (pacsp or sub or stp):
                    start_address = address
                stp = True
            elif opcode & _STP_MASK == _STP_D_SP:
                if not (sub or stp):
                    start_address = address
                stp = True
            elif stp and opcode & _ADD_FP_MASK == _ADD_FP:
                _log.debug("function_start: %x", start_address)
                pacsp = sub = stp = False
                results.add(start_address)
            elif pacsp or sub or stp:
                _log.debug("match_failed: %x", start_address)
                start_address = 0
                pacsp = sub = stp = False

    return results


def find_functions(memory_image: MemoryImage) -> set[int]:
    """Likely function entry points for the image's architecture."""
    if memory_image.architecture_name == "aarch64":
        return find_aarch64_functions(memory_image)
    raise ValueError(
        f"Unsupported memory image architecture: {memory_image.architecture_name}"
    )