from qbscript.types.symbol import Symbol, T
from qbscript.types.call import Call
from qbscript.types.environment import Environment
from qbscript.types.lambda_fn import Lambda

__all__ = ["Symbol", "T", "Call", "Environment", "Lambda"]
