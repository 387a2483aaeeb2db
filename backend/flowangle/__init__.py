"""FlowAngle — flow-shape geometric analysis."""

__version__ = "0.1.0"
