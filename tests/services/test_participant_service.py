import pytest
from datetime import date

from tourney.core.errors import ConflictError, ValidationError
from tourney.schemas.participant_schemas import ParticipantCreate, ParticipantUpdate
from tourney.services import participant_service


def register(store, name, game, **extra):
    return participant_service.register_participant(store, ParticipantCreate(name=name, game=game, **extra))


class TestRegisterParticipant:

    def test_register_success(self, store):
        participant = register(store, "  Yassine ", " FIFA 24 ", email=" y@example.com ", phone="0600")
        assert participant.id is not None
        assert participant.name == "Yassine"
        assert participant.game == "FIFA 24"
        assert participant.email == "y@example.com"
        assert participant.phone == "0600"
        assert participant.status == "active"
        assert participant.created_at.startswith(date.today().isoformat())

    def test_optional_contact_fields_default_to_empty(self, store):
        participant = register(store, "Yassine", "FIFA 24")
        assert participant.email == ""
        assert participant.phone == ""

    @pytest.mark.parametrize("name, game", [(None, "FIFA"), ("Yassine", None), ("", "FIFA"), ("Yassine", "   ")])
    def test_missing_name_or_game(self, store, name, game):
        with pytest.raises(ValidationError) as exc:
            register(store, name, game)
        assert exc.value.message == "Le nom et le jeu sont requis"

    @pytest.mark.parametrize("name", ["A", "  B  ", "x" * 41])
    def test_name_length_rejected(self, store, name):
        with pytest.raises(ValidationError) as exc:
            register(store, name, "Chess")
        assert exc.value.message == "Nom: 2 à 40 caractères"

    @pytest.mark.parametrize("name", ["Al", "x" * 40, " " + "x" * 40 + " "])
    def test_name_length_boundaries_accepted(self, store, name):
        participant = register(store, name, "Chess")
        assert participant.name == name.strip()

    def test_duplicate_active_registration_is_case_insensitive(self, store):
        register(store, "Yassine", "FIFA 24")
        with pytest.raises(ConflictError):
            register(store, "YASSINE", "fifa 24")

    def test_duplicate_check_folds_non_ascii(self, store):
        register(store, "Élodie", "Tekken")
        with pytest.raises(ConflictError):
            register(store, "éLODIE", "TEKKEN")

    def test_same_name_other_game_is_allowed(self, store):
        register(store, "Yassine", "FIFA 24")
        assert register(store, "Yassine", "Tekken").id is not None

    def test_conflict_leaves_single_row(self, store):
        register(store, "Yassine", "FIFA 24")
        with pytest.raises(ConflictError):
            register(store, "yassine", "FIFA 24")
        assert len(participant_service.list_all_participants(store)) == 1

    def test_reregister_after_delete(self, store):
        first = register(store, "Yassine", "FIFA 24")
        participant_service.delete_participant(store, first.id)
        assert register(store, "Yassine", "FIFA 24").id != first.id

    def test_reregister_after_ban(self, store):
        first = register(store, "Yassine", "FIFA 24")
        participant_service.update_participant(store, first.id, ParticipantUpdate(status="banned"))
        second = register(store, "yassine", "FIFA 24")
        assert second.id != first.id


class TestListParticipants:

    def test_active_only_newest_first(self, store, add_participant):
        add_participant(store, "Old", "Chess", "2026-03-01 10:00:00")
        add_participant(store, "New", "Chess", "2026-03-02 10:00:00")
        add_participant(store, "Banned", "Chess", "2026-03-03 10:00:00", status="banned")

        names = [p.name for p in participant_service.list_active_participants(store)]
        assert names == ["New", "Old"]

    def test_all_participants_include_every_status(self, store, add_participant):
        add_participant(store, "Old", "Chess", "2026-03-01 10:00:00")
        add_participant(store, "Banned", "Chess", "2026-03-03 10:00:00", status="banned")

        participants = participant_service.list_all_participants(store)
        assert [(p.name, p.status) for p in participants] == [("Banned", "banned"), ("Old", "active")]


class TestDeleteParticipant:

    def test_delete_removes_row(self, store):
        participant = register(store, "Yassine", "FIFA 24")
        participant_service.delete_participant(store, participant.id)
        assert participant_service.list_all_participants(store) == []

    def test_delete_missing_id_twice_is_silent(self, store):
        participant_service.delete_participant(store, 999)
        participant_service.delete_participant(store, 999)


class TestUpdateParticipant:

    def test_update_all_fields(self, store):
        participant = register(store, "Yassine", "FIFA 24")
        participant_service.update_participant(
            store, participant.id, ParticipantUpdate(status="banned", name=" Yass ", game=" PES ")
        )
        updated = participant_service.list_all_participants(store)[0]
        assert (updated.name, updated.game, updated.status) == ("Yass", "PES", "banned")

    def test_blank_fields_are_ignored(self, store):
        participant = register(store, "Yassine", "FIFA 24")
        participant_service.update_participant(store, participant.id, ParticipantUpdate(name="  ", game=""))
        updated = participant_service.list_all_participants(store)[0]
        assert (updated.name, updated.game, updated.status) == ("Yassine", "FIFA 24", "active")

    def test_update_missing_id_is_silent(self, store):
        participant_service.update_participant(store, 12345, ParticipantUpdate(status="banned"))
        assert participant_service.list_all_participants(store) == []

    def test_reactivating_banned_row_conflicts_with_newer_registration(self, store):
        first = register(store, "Amine", "FIFA")
        participant_service.update_participant(store, first.id, ParticipantUpdate(status="banned"))
        second = register(store, "amine", "fifa")

        with pytest.raises(ConflictError) as exc:
            participant_service.update_participant(store, first.id, ParticipantUpdate(status="active"))
        assert exc.value.status_code == 409

        active = participant_service.list_active_participants(store)
        assert [p.id for p in active] == [second.id]
        statuses = {p.id: p.status for p in participant_service.list_all_participants(store)}
        assert statuses == {first.id: "banned", second.id: "active"}

    def test_rename_onto_active_pair_conflicts(self, store):
        register(store, "Amine", "FIFA")
        other = register(store, "Sara", "PES")

        with pytest.raises(ConflictError):
            participant_service.update_participant(store, other.id, ParticipantUpdate(name="AMINE", game="fifa"))

        unchanged = [p for p in participant_service.list_all_participants(store) if p.id == other.id][0]
        assert (unchanged.name, unchanged.game) == ("Sara", "PES")

    def test_rename_onto_banned_pair_is_allowed(self, store):
        banned = register(store, "Amine", "FIFA")
        participant_service.update_participant(store, banned.id, ParticipantUpdate(status="banned"))
        other = register(store, "Sara", "FIFA")

        participant_service.update_participant(store, other.id, ParticipantUpdate(name="Amine"))
        assert [p.name for p in participant_service.list_active_participants(store)] == ["Amine"]

    def test_recasing_own_name_is_allowed(self, store):
        participant = register(store, "amine", "FIFA")
        participant_service.update_participant(store, participant.id, ParticipantUpdate(name="Amine", status="active"))
        assert participant_service.list_all_participants(store)[0].name == "Amine"
