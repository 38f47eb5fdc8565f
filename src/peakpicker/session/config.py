from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class PeakPickerConfig(BaseSettings):

    find_nearest: bool = Field(True, alias='PEAK_PICKER_FIND_NEAREST')

    threshold: float = Field(25, gt=0, alias='PEAK_PICKER_THRESHOLD')
    scale_x: float = Field(1, gt=0, alias='PEAK_PICKER_SCALE_X')
    scale_y: float = Field(1, gt=0, alias='PEAK_PICKER_SCALE_Y')

    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        extra='ignore',
        populate_by_name=True,
    )

    @property
    def scale(self) -> tuple[float, float]:
        return self.scale_x, self.scale_y


PEAK_PICKER_CONFIG = PeakPickerConfig()
