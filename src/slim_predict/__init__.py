"""slim-predict: command-line front end for SLIM top-N prediction.

Resolves the process arguments into a validated, immutable
configuration that the prediction step consumes.
"""

from slim_predict.version import __version__

__all__: list[str] = ["__version__"]
