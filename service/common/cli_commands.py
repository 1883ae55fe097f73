######################################################################
# Copyright 2016, 2024 John J. Rofrano. All Rights Reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
# https://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
######################################################################

"""
Flask CLI Command Extensions
"""
import click
from flask import current_app as app  # Import Flask application
from service.models import store, StoreError


######################################################################
# Command to create (or reset) the stocks collection file
######################################################################
@app.cli.command("init-store")
@click.option("--force", is_flag=True, help="Overwrite an existing collection")
def init_store(force):
    """Creates an empty stocks collection"""
    app.logger.info("Initializing the stocks collection")
    try:
        created = store.init_store(force=force)
    except StoreError as error:
        raise click.ClickException(f"Cannot create {store.path}: {error}") from error
    if created:
        click.echo(f"Created empty collection at {store.path}")
    else:
        click.echo(f"Collection already exists at {store.path}; use --force to reset it")
