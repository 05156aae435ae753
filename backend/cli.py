import click
import logging
from flask.cli import with_appcontext
from .models import db, EQUIPMENT_MODELS
from shared.enums import EquipmentKind

logger = logging.getLogger(__name__)


@click.command('init-db')
@with_appcontext
def init_db_command():
    """Create the database tables."""
    logger.info("Starting database initialization")
    db.create_all()
    logger.info("Database tables created successfully")
    click.echo("Initialized the database.")


@click.command('check-orphans')
@click.option('--fix', is_flag=True, help='Delete equipment rows whose project no longer exists')
@click.option('--kind', type=click.Choice([kind.value for kind in EquipmentKind]),
              help='Check a single equipment kind')
@with_appcontext
def check_orphans_command(fix, kind):
    """Check that every equipment row references an existing project."""
    from .utils import get_orphaned_equipment

    orphaned = get_orphaned_equipment(EquipmentKind(kind) if kind else None)
    total_orphaned = sum(len(ids) for ids in orphaned.values())

    if total_orphaned == 0:
        click.echo("All equipment references a valid project - no orphaned records found")
        return

    click.echo(f"Found {total_orphaned} orphaned records:")
    for kind_value, record_ids in orphaned.items():
        click.echo(f"\n{kind_value.upper()}: {len(record_ids)} orphaned records")
        shown = ', '.join(str(record_id) for record_id in record_ids[:10])
        click.echo(f"  IDs: {shown}")
        if len(record_ids) > 10:
            click.echo(f"  ... and {len(record_ids) - 10} more")

    if not fix:
        click.echo("\nUse --fix to delete these orphaned records")
        return

    click.echo("\nDeleting orphaned records...")
    try:
        for kind_value, record_ids in orphaned.items():
            model = EQUIPMENT_MODELS[EquipmentKind(kind_value)]
            model.query.filter(model.id.in_(record_ids)).delete(synchronize_session=False)
        db.session.commit()
        logger.info(f"Deleted {total_orphaned} orphaned equipment records")
        click.echo(f"Deleted {total_orphaned} orphaned records")
    except Exception as e:
        db.session.rollback()
        logger.error(f"Failed to delete orphaned records: {e}", exc_info=True)
        raise click.ClickException(f"Failed to delete orphaned records: {e}")
