"""ログプレフィックス定数."""


class LogPrefix:
    """ロギング用プレフィックス定数."""

    APP_LIFECYCLE = "[APP_LIFECYCLE]"
    LIST_AVENGER = "[LIST_AVENGER]"
    INSERT_AVENGER = "[INSERT_AVENGER]"
    DELETE_AVENGER = "[DELETE_AVENGER]"
