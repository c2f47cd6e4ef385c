"""Application commands (use cases) for cut planning."""

from __future__ import annotations

import logging
from typing import Sequence

from sheetcut.domain import CutPlanError, GuillotinePacker, Unit, build_packing_result

from .cut_list import CutList
from .dtos import CutPlanOutput, PieceInput, SheetInput

logger = logging.getLogger(__name__)


class CalculateCutsCommand:
    """Command to compute a cut plan from raw sheet and piece inputs.

    Each execution builds its own CutList, so piece ids always start at 1
    and repeated runs on the same input produce identical plans.
    """

    def execute(
        self,
        sheet: SheetInput,
        pieces: Sequence[PieceInput],
        unit: Unit = Unit.CM,
    ) -> CutPlanOutput:
        """Execute the planning command.

        Args:
            sheet: Stock sheet dimensions.
            pieces: Requested pieces in insertion order.
            unit: Display unit carried through to the output.

        Returns:
            CutPlanOutput with cuts and per-sheet layouts, or with errors
            and no cuts if the input is invalid or a piece cannot fit.
        """
        errors = sheet.validate()
        for index, piece_input in enumerate(pieces):
            errors.extend(f"Piece {index + 1}: {e}" for e in piece_input.validate())
        if errors:
            return CutPlanOutput(unit=unit, errors=errors)

        cut_list = CutList()
        for piece_input in pieces:
            cut_list.add_piece(piece_input.width, piece_input.height, piece_input.quantity)

        try:
            packer = GuillotinePacker(sheet.width, sheet.height)
            cuts = packer.pack(cut_list.pieces)
        except CutPlanError as e:
            logger.info("Cut planning failed: %s", e)
            return CutPlanOutput(unit=unit, errors=[str(e)])

        return CutPlanOutput(
            cuts=cuts,
            result=build_packing_result(cuts, sheet.width, sheet.height),
            unit=unit,
        )
