"""
Replayable convex-hull construction: every Push/Pop of the monotone-chain scan
is recorded so the construction can be stepped through forward and backward.
"""
from hull_stepper.chain_builder import ChainLog, Operation, OpKind, Phase, build_chain
from hull_stepper.errors import HullError, InvalidInputError, NonFiniteCoordinateError, NoTimelineError
from hull_stepper.geometry import Point, orientation
from hull_stepper.hull_engine import ALGORITHMS, Frame, HullAlgorithm, HullResult, MonotoneChainScan, create_algorithm
from hull_stepper.step_navigator import NavigatorState, StepNavigator

__version__ = "0.1.0"
