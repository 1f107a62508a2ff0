import configparser
import logging
import os
import sys
from typing import Optional, Sequence, Union

from usageparse.error import ConfigError

DEFAULT_SECTION = "usageparse"
DEFAULT_DELIMITER = ","

#
# パーサーの設定
#
class ParserConfig():
    def __init__(self, delimiter: str = DEFAULT_DELIMITER, log_level: Union[None, int, str] = None):
        if not delimiter:
            raise ConfigError("array delimiter must not be empty")
        self.delimiter: str = delimiter
        self.log_level: Optional[int] = parse_log_level(log_level)

    def __repr__(self):
        return "<ParserConfig delimiter='{}' log_level={}>".format(self.delimiter, self.log_level)

#
def parse_log_level(level: Union[None, int, str]) -> Optional[int]:
    """ ログレベルを名前または数値で指定する """
    if level is None or level == "":
        return None
    if isinstance(level, int):
        return level
    text = str(level).strip()
    if text.isdigit():
        return int(text)
    value = logging.getLevelName(text.upper())
    if not isinstance(value, int):
        raise ConfigError("unknown log level name: {}".format(level))
    return value

#
# パーサーごとのログレベルを持つロガー
#
class ParserLogAdapter(logging.LoggerAdapter):
    """
    名前付きロガーのレベルを変えずに、パーサー単位でログの出力を制御する。
    レベルが指定されていなければ、元のロガーの設定に従う。
    """
    def __init__(self, logger: logging.Logger, level: Optional[int] = None):
        super().__init__(logger, {})
        self.level: Optional[int] = level

    def __repr__(self):
        return "<ParserLogAdapter '{}' level={}>".format(self.logger.name, self.level)

    def isEnabledFor(self, level):
        if self.level is None:
            return self.logger.isEnabledFor(level)
        return level >= self.level

    def getEffectiveLevel(self):
        if self.level is None:
            return self.logger.getEffectiveLevel()
        return self.level

    def log(self, level, msg, *args, **kwargs):
        if not self.isEnabledFor(level):
            return
        msg, kwargs = self.process(msg, kwargs)
        if self.logger.isEnabledFor(level):
            self.logger.log(level, msg, *args, **kwargs)
            return
        # ロガー自体のレベルは迂回し、ハンドラには渡す
        exc_info = kwargs.get("exc_info")
        if isinstance(exc_info, BaseException):
            exc_info = (type(exc_info), exc_info, exc_info.__traceback__)
        elif exc_info and not isinstance(exc_info, tuple):
            exc_info = sys.exc_info()
        record = self.logger.makeRecord(
            self.logger.name, level, "(unknown file)", 0, msg, args,
            exc_info or None, extra=kwargs.get("extra")
        )
        self.logger.handle(record)

#
# ini形式の設定ファイルを読み込む
#   [usageparse]
#   delimiter = :
#   loglevel = debug
#
def load_config(paths: Union[str, Sequence[str]], section: str = DEFAULT_SECTION) -> ParserConfig:
    if isinstance(paths, (str, os.PathLike)):
        paths = [paths]

    cfg = configparser.ConfigParser(interpolation=None)
    for p in paths:
        if not os.path.isfile(p):
            raise ConfigError("config file is not found: {}".format(p))
        cfg.read(p, encoding="utf-8")

    if not cfg.has_section(section):
        return ParserConfig()

    delimiter = DEFAULT_DELIMITER
    if cfg.has_option(section, "delimiter"):
        # 前後の空白を区切り文字として使うことはできない
        delimiter = cfg.get(section, "delimiter")

    loglevel = None
    if cfg.has_option(section, "loglevel"):
        loglevel = cfg.get(section, "loglevel")

    return ParserConfig(delimiter, loglevel)
