"""Application configuration schema."""

import hashlib
import json
from typing import Annotated

from pydantic import Field

from niuniu_config.config.schemas.base import ChannelType, LogLevel
from niuniu_config.data_model import FoldedBaseModel


class DbConfig(FoldedBaseModel):
    """Database connection parameters.

    Attributes:
        driver_name: Identifier of the database driver (e.g. 'mysql').
        dsn: Opaque connection string handed to the driver.
        show_sql: Log every SQL statement.
        show_exec_time: Log statement execution time.
        max_idle: Idle connection cap.
        max_open: Total connection cap.
    """

    driver_name: Annotated[str, Field(alias="driverName")] = ""
    dsn: Annotated[str, Field(alias="dsn")] = ""
    show_sql: Annotated[bool, Field(alias="showSql")] = False
    show_exec_time: Annotated[bool, Field(alias="showExecTime")] = False
    max_idle: Annotated[int, Field(alias="maxIdle", ge=0)] = 0
    max_open: Annotated[int, Field(alias="maxOpen", ge=0)] = 0


class LogConfig(FoldedBaseModel):
    """Logging sink parameters.

    Attributes:
        path: Directory for log files.
        level: Log level name, see LogLevel.
    """

    path: Annotated[str, Field(alias="Path")] = ""
    level: Annotated[str, Field(alias="Level")] = ""

    @property
    def is_recognized_level(self) -> bool:
        """Whether level names one of the LogLevel values."""
        return self.level.lower() in {lvl.value for lvl in LogLevel}


class PathConfig(FoldedBaseModel):
    """Filesystem paths such as the static file root."""

    file_path: Annotated[str, Field(alias="FilePath")] = ""


class MsgChannelType(FoldedBaseModel):
    """Messaging backend selection and its parameters.

    channel_type is not restricted to ChannelType values; consumers decide
    what to do with anything else. The kafka fields are only meaningful
    when channel_type is 'kafka'.
    """

    channel_type: Annotated[str, Field(alias="ChannelType")] = ""
    kafka_hosts: Annotated[str, Field(alias="KafkaHosts")] = ""
    kafka_topic: Annotated[str, Field(alias="KafkaTopic")] = ""

    @property
    def is_kafka(self) -> bool:
        """Whether the kafka backend is selected."""
        return self.channel_type == ChannelType.KAFKA.value

    @property
    def is_gochannel(self) -> bool:
        """Whether the in-process channel backend is selected."""
        return self.channel_type == ChannelType.GOCHANNEL.value

    def kafka_broker_list(self) -> list[str]:
        """Split kafka_hosts into individual broker addresses.

        Returns:
            Broker addresses in document order, blanks removed.
        """
        return [host.strip() for host in self.kafka_hosts.split(",") if host.strip()]


class Config(FoldedBaseModel):
    """Root configuration record.

    Built once at startup by ConfigLoader and never mutated afterwards.

    Attributes:
        app_name: Human-readable service name.
        db: Database connection parameters.
        log: Logging sink parameters.
        static_path: Static asset paths.
        msg_channel: Messaging backend selection.
    """

    app_name: Annotated[str, Field(alias="AppName")] = ""
    db: Annotated[DbConfig, Field(alias="DbConfig", default_factory=DbConfig)]
    log: Annotated[LogConfig, Field(alias="Log", default_factory=LogConfig)]
    static_path: Annotated[
        PathConfig, Field(alias="StaticPath", default_factory=PathConfig)
    ]
    msg_channel: Annotated[
        MsgChannelType, Field(alias="MsgChannelType", default_factory=MsgChannelType)
    ]

    def to_document(self) -> dict[str, object]:
        """Dump the record keyed the way the YAML document spells its keys."""
        return self.model_dump(mode="json", by_alias=True)

    def to_normalized_json(self) -> str:
        """Convert to JSON with sorted keys.

        Repeated calls on equal records produce identical output.
        """
        return json.dumps(self.to_document(), sort_keys=True, separators=(",", ":"))

    def compute_checksum(self) -> str:
        """Compute SHA-256 checksum of the normalized record.

        Returns:
            Hex-encoded SHA-256 checksum.
        """
        normalized = self.to_normalized_json()
        return hashlib.sha256(normalized.encode("utf-8")).hexdigest()
