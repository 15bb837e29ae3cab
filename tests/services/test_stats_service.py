from datetime import date

from tourney.services import stats_service

TODAY = date(2026, 3, 15)


class TestPublicStats:

    def test_empty_store(self, store):
        stats = stats_service.public_stats(store, today=TODAY)
        assert stats.total_players == 0
        assert stats.total_games == 0
        assert stats.top_game == "—"
        assert stats.today_count == 0
        assert stats.game_rankings == []

    def test_counts_active_participants_only(self, store, add_participant):
        add_participant(store, "Amine", "FIFA", "2026-03-15 09:00:00")
        add_participant(store, "Sara", "FIFA", "2026-03-14 22:00:00")
        add_participant(store, "Omar", "Tekken", "2026-03-15 12:00:00")
        add_participant(store, "Nora", "Valorant", "2026-03-15 12:30:00", status="banned")

        stats = stats_service.public_stats(store, today=TODAY)
        assert stats.total_players == 3
        assert stats.total_games == 2
        assert stats.top_game == "FIFA"
        assert stats.today_count == 2
        assert [(r.game, r.count) for r in stats.game_rankings] == [("FIFA", 2), ("Tekken", 1)]

    def test_serializes_with_camel_case_keys(self, store, add_participant):
        add_participant(store, "Amine", "FIFA", "2026-03-15 09:00:00")
        payload = stats_service.public_stats(store, today=TODAY).model_dump(by_alias=True)
        assert set(payload) == {"totalPlayers", "totalGames", "topGame", "todayCount", "gameRankings"}


class TestDashboard:

    def test_dashboard_counts(self, store, add_participant):
        add_participant(store, "Amine", "FIFA", "2026-03-15 09:00:00")
        add_participant(store, "Sara", "FIFA", "2026-03-14 22:00:00", status="banned")
        add_participant(store, "Omar", "Tekken", "2026-03-15 12:00:00", status="withdrawn")

        board = stats_service.dashboard(store, today=TODAY)
        assert board.total == 3
        assert board.active == 1
        assert board.banned == 1
        assert board.today == 2
        assert [(r.game, r.count) for r in board.game_rankings] == [("FIFA", 1)]
        assert [r.name for r in board.recent_registrations] == ["Omar", "Amine", "Sara"]
        assert board.recent_registrations[0].status == "withdrawn"

    def test_recent_registrations_capped_at_ten(self, store, add_participant):
        for i in range(12):
            add_participant(store, f"Player{i:02d}", "Chess", f"2026-03-01 10:{i:02d}:00")

        recent = stats_service.dashboard(store, today=TODAY).recent_registrations
        assert len(recent) == 10
        assert recent[0].name == "Player11"

    def test_daily_stats_last_fourteen_days_with_data(self, store, add_participant):
        for day in range(1, 17):
            add_participant(store, f"Player{day:02d}", "Chess", f"2026-02-{day:02d} 10:00:00")
        add_participant(store, "Extra", "Chess", "2026-02-16 18:00:00")

        daily = stats_service.dashboard(store, today=TODAY).daily_stats
        assert len(daily) == 14
        assert (daily[0].date, daily[0].count) == ("2026-02-16", 2)
        assert daily[-1].date == "2026-02-03"
