from feedback_hub.extensions import db
from feedback_hub.models.feedback import Feedback


def test_init_db(runner):
    result = runner.invoke(args=["init-db"])
    assert result.exit_code == 0, result.output
    assert "Database tables created" in result.output


def test_seed_feedback(app, runner):
    result = runner.invoke(args=["seed-feedback", "--count", "6"])
    assert result.exit_code == 0, result.output
    assert "Seeded 6 feedback records" in result.output

    with app.app_context():
        records = db.session.query(Feedback).all()
        assert len(records) == 6
        assert {r.category for r in records} == {"Work Environment", "Leadership", "Growth", "Others"}
        assert not any(r.is_reviewed for r in records)


def test_seed_feedback_rejects_zero(runner):
    result = runner.invoke(args=["seed-feedback", "--count", "0"])
    assert result.exit_code != 0
