from datetime import date
from typing import Dict, List, Optional

from tourney.core.database import Store
from tourney.schemas import stats_schemas

NO_GAME = "—"
RECENT_LIMIT = 10
DAILY_LIMIT = 14

# Ties keep a stable order by game name
GAME_RANKING_SQL = (
    "SELECT game, COUNT(*) AS count FROM participants WHERE status = 'active' "
    "GROUP BY game ORDER BY count DESC, game ASC"
)


def _today(today: Optional[date]) -> str:
    return (today or date.today()).isoformat()


def _count(store: Store, sql: str, params: Optional[Dict] = None) -> int:
    return store.execute(sql, params)[0]["n"]


def game_rankings(store: Store) -> List[stats_schemas.GameRanking]:
    return [stats_schemas.GameRanking(**row) for row in store.execute(GAME_RANKING_SQL)]


def public_stats(store: Store, today: Optional[date] = None) -> stats_schemas.PublicStats:
    rankings = game_rankings(store)
    return stats_schemas.PublicStats(
        total_players=_count(store, "SELECT COUNT(*) AS n FROM participants WHERE status = 'active'"),
        total_games=len(rankings),
        top_game=rankings[0].game if rankings else NO_GAME,
        today_count=_count(
            store,
            "SELECT COUNT(*) AS n FROM participants WHERE status = 'active' AND DATE(created_at) = :today",
            {"today": _today(today)},
        ),
        game_rankings=rankings,
    )


def dashboard(store: Store, today: Optional[date] = None) -> stats_schemas.Dashboard:
    """Admin overview: counts by status, per-game ranking and recent activity."""
    recent = store.execute(
        "SELECT id, name, game, created_at, status FROM participants "
        "ORDER BY created_at DESC, id DESC LIMIT :limit",
        {"limit": RECENT_LIMIT},
    )
    daily = store.execute(
        "SELECT DATE(created_at) AS date, COUNT(*) AS count FROM participants "
        "GROUP BY DATE(created_at) ORDER BY date DESC LIMIT :limit",
        {"limit": DAILY_LIMIT},
    )
    return stats_schemas.Dashboard(
        total=_count(store, "SELECT COUNT(*) AS n FROM participants"),
        active=_count(store, "SELECT COUNT(*) AS n FROM participants WHERE status = 'active'"),
        banned=_count(store, "SELECT COUNT(*) AS n FROM participants WHERE status = 'banned'"),
        today=_count(
            store,
            "SELECT COUNT(*) AS n FROM participants WHERE DATE(created_at) = :today",
            {"today": _today(today)},
        ),
        game_rankings=game_rankings(store),
        recent_registrations=[stats_schemas.RecentRegistration(**row) for row in recent],
        daily_stats=[stats_schemas.DailyCount(**row) for row in daily],
    )
