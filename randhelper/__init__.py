"""
randhelper - deterministic random helpers for pygame games.

`rnd` samples from the process-wide generator:

    from randhelper import rnd, set_seed
    set_seed(42)
    rnd.next_int(10)
    rnd.next_vector2(3.0)

Build a `RandomHelper(GeneratorState(seed))` for an independent stream.
"""
from .errors import EmptyCollectionError, InvalidArgument
from .sampling import RandomHelper
from .sim.determinism import GeneratorState, get_generator, get_rng, get_seed, set_seed
from .values import SampledColor

__version__ = "1.0.0"

# Process-wide helper (not thread-safe; serialize access if shared across threads).
rnd = RandomHelper()
