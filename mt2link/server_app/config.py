from functools import lru_cache

from pydantic import Field
from pydantic_settings import SettingsConfigDict, BaseSettings

from mt2link.parsing.registers.maps import NodeClass


class ServerSettings(BaseSettings):
    server_ip: str = Field("127.0.0.1", validation_alias="SERVER_IP")
    server_port: int = Field(10290, validation_alias="SERVER_PORT")

    default_node_class: NodeClass = Field(NodeClass.TILE, validation_alias="DEFAULT_NODE_CLASS")
    max_frame_size: int = Field(1024, gt=0, validation_alias="MAX_FRAME_SIZE")

    log_ring_size: int = Field(200, gt=0, validation_alias="LOG_RING_SIZE")
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", populate_by_name=True, extra="ignore")


@lru_cache
def get_settings() -> ServerSettings:
    return ServerSettings()
