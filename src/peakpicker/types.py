from typing import NewType, TypeAlias

import pandas as pd
from numpy.typing import NDArray  # noqa: I100


# --------        structures        --------
Array: TypeAlias = NDArray

Frame: TypeAlias = pd.DataFrame


# --------        units        --------
Index = NewType('Index', int)
