"""
config.py - パス解決・アプリ定数
Bug Tracker v1.0
"""

import logging
import os
import sys

# ---------------------------------------------------------------------------
# パス解決（exe 化対応）
# ---------------------------------------------------------------------------


def get_base_path() -> str:
    """
    実行環境に応じてアプリのベースディレクトリを返す。
    - exe 化後  : exe ファイルの存在するディレクトリ
    - スクリプト: プロジェクトルート
    """
    if getattr(sys, "frozen", False):
        return os.path.dirname(sys.executable)
    # config.py is in bugtracker/, so project root is one level up
    return os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


BASE_PATH = get_base_path()

# DB パス: 環境変数で上書き可能
DB_PATH = os.environ.get("BUGTRACKER_DB_PATH") or os.path.join(BASE_PATH, "data.db")


def get_log_level() -> int:
    """BUGTRACKER_LOG_LEVEL (DEBUG/INFO/...) を logging のレベルに変換する。"""
    name = os.environ.get("BUGTRACKER_LOG_LEVEL", "INFO").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


# ---------------------------------------------------------------------------
# ストレージキー
# ---------------------------------------------------------------------------

USERS_KEY = "bug_tracker_users"
BUGS_KEY = "bug_tracker_bugs"
CURRENT_USER_KEY = "bug_tracker_current_user"

# ---------------------------------------------------------------------------
# アプリ定数
# ---------------------------------------------------------------------------

APP_TITLE = "Bug Tracker"
APP_VERSION = "0.1.0"

# ダッシュボードごとのポーリング間隔（秒）
ADMIN_REFRESH_SECONDS = 5.0
DEVELOPER_REFRESH_SECONDS = 2.0

# 送信成功メッセージの表示時間（秒）
SUCCESS_MESSAGE_SECONDS = 3.0

# ---------------------------------------------------------------------------
# カラーパレット
# ---------------------------------------------------------------------------

COLOR_BG = "#F3F4F6"  # 背景
COLOR_CARD = "#FFFFFF"  # カード背景
COLOR_BORDER = "#D1D5DB"  # ボーダー
COLOR_TEXT_MUTED = "#6B7280"  # 薄いテキスト
COLOR_TEXT_MAIN = "#111827"  # メインテキスト
COLOR_PRIMARY = "#2563EB"  # プライマリ（青）
COLOR_DANGER = "#DC2626"  # 危険色（赤）
COLOR_SUCCESS = "#16A34A"  # 成功（緑）

# ステータス別（バッジ背景, 文字色）
STATUS_COLORS = {
    "reported": ("#FEF3C7", "#92400E"),
    "processing": ("#DBEAFE", "#1E40AF"),
    "completed": ("#DCFCE7", "#166534"),
}

# 優先度別（バッジ背景, 文字色）
PRIORITY_COLORS = {
    "low": ("#DCFCE7", "#166534"),
    "medium": ("#DBEAFE", "#1E40AF"),
    "high": ("#FFEDD5", "#9A3412"),
    "critical": ("#FEE2E2", "#991B1B"),
}

# AppBar
COLOR_APPBAR_BG = "#FFFFFF"
COLOR_APPBAR_FG = "#111827"

# UI 定数
BORDER_RADIUS_CARD = 10
BORDER_RADIUS_BTN = 6
SHADOW_ELEVATION = 2
BOARD_COLUMN_MIN_HEIGHT = 400
