from .dataset import (
    Dataset, FactoryDataset,
)

__all__ = [
    'Dataset', 'FactoryDataset',
]
