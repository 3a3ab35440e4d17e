import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

DATA_DIR = Path(os.getenv("RUNCLUB_DATA_DIR", "data"))
USER_KEY = "runClubUser"
HISTORY_KEY = "runHistory"

# currency units per km
PLEDGE_RATE = 1.00
NO_PLEDGE = "none"

PLEDGE_OPTIONS = {
    "none": "No pledge",
    "FoodBank": "Local Food Bank",
    "ReliefFund": "Disaster Relief Fund",
    "ShelterAid": "Community Shelter Aid",
    "YouthSports": "Youth Sports Programs",
}
