from pydantic import BaseModel, Field
from typing import List, Optional

from .participant_schemas import RecentRegistration

class GameRanking(BaseModel):
    game: str
    count: int

class DailyCount(BaseModel):
    date: Optional[str] = None
    count: int

class PublicStats(BaseModel):
    total_players: int = Field(alias="totalPlayers")
    total_games: int = Field(alias="totalGames")
    top_game: str = Field(alias="topGame")
    today_count: int = Field(alias="todayCount")
    game_rankings: List[GameRanking] = Field(alias="gameRankings")

    class Config:
        populate_by_name = True

class Dashboard(BaseModel):
    total: int
    active: int
    banned: int
    today: int
    game_rankings: List[GameRanking] = Field(alias="gameRankings")
    recent_registrations: List[RecentRegistration] = Field(alias="recentRegistrations")
    daily_stats: List[DailyCount] = Field(alias="dailyStats")

    class Config:
        populate_by_name = True
