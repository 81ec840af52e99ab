from uwodb_clock.core.calculator import TimePhaseCalculator
from uwodb_clock.core.port import port_phase
from uwodb_clock.core.ring import progress_ring
from uwodb_clock.core.season import season_cycle

__all__ = ["TimePhaseCalculator", "port_phase", "progress_ring", "season_cycle"]
