import os
from dotenv import load_dotenv
from pydantic import BaseModel, Field

load_dotenv()

class Settings(BaseModel):
    data_dir: str = os.getenv("DATA_DIR","./data")
    log_level: str = os.getenv("LOG_LEVEL","INFO")
    ticks_per_second: int = int(os.getenv("TICKS_PER_SECOND","20"))

    # Économie
    money_objective: str = os.getenv("MONEY_OBJECTIVE","money")
    money_display: str = os.getenv("MONEY_DISPLAY","Solde")
    item_reward: int = int(os.getenv("ITEM_REWARD","25"))

    # Feedback sonore
    reward_sound: str = os.getenv("REWARD_SOUND","random.levelup")
    sound_volume: float = Field(default_factory=lambda: float(os.getenv("SOUND_VOLUME","0.4")))

    # Transferts
    transfer_range: float = Field(default_factory=lambda: float(os.getenv("TRANSFER_RANGE","2")))
    marker_item: str = os.getenv("MARKER_ITEM","minecraft:stick")

settings = Settings()
