#!/usr/bin/env python
import json

import click

from deco_value_oracle.classify import classify_event, describe_non_actionable
from deco_value_oracle.exceptions import OracleError
from deco_value_oracle.rules import load_rule_table


@click.group()
def cli():
    pass

@click.command()
@click.argument("event_type")
@click.argument("payload_file", type=click.File("r"))
def classify(event_type, payload_file):
    "Shows the contribution a saved webhook payload classifies as"
    try:
        payload = json.load(payload_file)
        event = classify_event(event_type, payload)
    except (ValueError, OracleError) as exc:
        raise click.ClickException(f"Can't classify {payload_file.name}: {exc}")
    if event is None:
        click.echo(describe_non_actionable(event_type, payload))
        return
    click.echo(f"contribution_type: {event.contribution_type}")
    click.echo(f"contributor: {event.contributor}")
    click.echo(f"repository_url: {event.repository_url}")
    click.echo(f"source_reference: {event.source_reference}")


@click.command("check-rules")
@click.argument("csv_file", type=click.File("r"))
def check_rules(csv_file):
    "Loads a values.csv and shows the rules in it"
    try:
        rules = load_rule_table(csv_file.read())
    except OracleError as exc:
        raise click.ClickException(f"{csv_file.name}: {exc.message}")
    for (contribution_type, role), rule in sorted(rules.items()):
        click.echo(
            f"{contribution_type},{role}: {rule.base_value:g} "
            f"(reaction multipliers {rule.member_reaction_multiplier:g}/{rule.non_member_reaction_multiplier:g})"
        )
    click.echo(f"{len(rules)} rules")


cli.add_command(classify)
cli.add_command(check_rules)


if __name__ == "__main__":
    cli()
