"""Background worker running the team balancer off the UI thread."""

# Bounceball Pairing
# Copyright (C) 2025  Bounceball Pairing developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import random
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from PyQt6 import QtCore

from bounceball.balancing.balancer import BalancerConfig, TeamBalancer
from bounceball.exceptions import BounceballException
from bounceball.history.pair_history import PairHistory
from bounceball.models.constraint import Constraint
from bounceball.models.player import Player
from bounceball.type_hints import Teams
from bounceball.utils import setup_logger

logger = setup_logger(__name__)


@dataclass
class BalanceRequest:
    """Everything one balancing run needs."""

    players: Sequence[Player]
    team_count: int
    constraints: Sequence[Constraint] = ()
    exclude_composition: Optional[Teams] = None
    pair_history: Optional[PairHistory] = None
    config: BalancerConfig = field(default_factory=BalancerConfig)
    seed: Optional[int] = None


class BalanceWorker(QtCore.QObject):
    """Worker for generating teams in the background.

    Move it to a ``QThread`` and connect ``thread.started`` to ``run``, or
    use :func:`start_balance_thread`. Each worker owns its own random source.
    """

    finished = QtCore.pyqtSignal(object)  # the generated teams
    error = QtCore.pyqtSignal(str)
    done = QtCore.pyqtSignal(bool, str)  # (success, message)

    def __init__(self, request: BalanceRequest):
        super().__init__()
        self.request = request
        self._cancelled = False

    def cancel(self) -> None:
        """Ask a running search to stop at its next check."""
        self._cancelled = True

    def is_cancelled(self) -> bool:
        return self._cancelled

    def run(self) -> None:
        """Execute the balancing run and report through signals."""
        req = self.request
        balancer = TeamBalancer(config=req.config, rng=random.Random(req.seed))
        try:
            result = balancer.balance(
                req.players,
                req.team_count,
                constraints=req.constraints,
                exclude_composition=req.exclude_composition,
                pair_history=req.pair_history,
                should_stop=self.is_cancelled,
            )
        except BounceballException as e:
            logger.warning(f"Balancing failed: {e}")
            self.error.emit(str(e))
            self.done.emit(False, str(e))
            return

        teams: List[List[Player]] = result.teams
        self.finished.emit(teams)
        self.done.emit(
            True,
            f"spread={result.spread:.3f}, penalty={result.penalty}",
        )


def start_balance_thread(worker: BalanceWorker) -> QtCore.QThread:
    """Run ``worker`` on a new QThread and clean both up when it is done.

    The caller keeps a reference to the returned thread while it runs.
    """
    thread = QtCore.QThread()
    worker.moveToThread(thread)

    thread.started.connect(worker.run)
    worker.done.connect(thread.quit)
    worker.done.connect(worker.deleteLater)
    thread.finished.connect(thread.deleteLater)

    thread.start()
    return thread
