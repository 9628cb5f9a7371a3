from pathlib import Path
import sys

import pytest

# Add repo root so we can import nip41.*
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

# Some constant, random-generated keys
KEY1 = "0b441d3662962b4060e15801da6edbf017c14574a03ce8076ceb565fbdad12c1"
KEY2 = "c6431e41a67ca926e2c1b7356b9266642d3e039df9f3b428586910305c522635"
KEY3 = "26d5cf30786a9d2c6f6ef3dffa687257d5ec3baae9e30a3f74d96bbae192f3a7"
SEED1 = (
    "4a452d8daa6e997ff65bf681262a61b5cadb0ec65989adc594f52cabc96747a1"
    "9fc6b21bc4db3d9dad553beadc56156b38c377a92d6952dcd2f5d2fe874a2985"
)
MNEMO1 = "oil oil oil oil oil oil oil oil oil oil oil oil"


@pytest.fixture
def seed1():
    return bytes.fromhex(SEED1)
