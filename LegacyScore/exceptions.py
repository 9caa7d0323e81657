class LegacyScoreError(Exception):
    pass


class NestingTooDeepError(LegacyScoreError):
    pass


class UnsupportedModeError(LegacyScoreError):
    pass


class ConfigError(LegacyScoreError):
    pass
