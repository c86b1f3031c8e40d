"""Shared fixtures for monsterstats tests."""

from __future__ import annotations

import numpy as np
import pandas as pd
import pytest

from monsterstats.table import MonsterTable


@pytest.fixture
def monster_df() -> pd.DataFrame:
    """Small monster table with the columns the notebook uses."""
    return pd.DataFrame({
        "name": ["Goblin", "Ogre", "Hobgoblin", "Adult Red Dragon", "Kobold", "Hill Giant"],
        "size": ["Small", "Large", "Medium", "Huge", "Small", "Huge"],
        "monster_type": ["humanoid", "giant", "humanoid", "dragon", "humanoid", "giant"],
        "hp": [7, 59, 11, 256, np.nan, 105],
        "strength": [8, 19, 13, 27, 7, 21],
        "ac": [15, 11, 18, 19, 12, np.nan],
    })


@pytest.fixture
def monster_table(monster_df) -> MonsterTable:
    return MonsterTable.from_dataframe(monster_df)
