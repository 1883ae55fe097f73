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
Stocks Service

This service implements a REST API that allows you to List the stocks
(promotions) kept in the XML store and to Add a new one
"""

# Third-party
from flask import current_app as app, jsonify, request

# First-party
from service.common import status  # HTTP status codes
from service.common.error_handlers import text_response
from service.models import (
    FIELDS,
    FormatError,
    Stock,
    StorageReadError,
    StorageWriteError,
)

# Fixed answers of the stocks API
LIST_FAILED = "Не удалось обработать данные"
ADD_READ_FAILED = "Не удалось получить доступ к данынм"
ADD_PARSE_FAILED = "Не удалось обработать данные для записи"
ADD_WRITE_FAILED = "Не удалось сохранить новые данные"
ADD_SUCCEEDED = "Акция успешно добавлена!"


######################################################################
# API info endpoint
######################################################################
@app.route("/api", methods=["GET"])
def api_index():
    """API info response"""
    return (
        jsonify(
            name="Stocks Service",
            version="1.0.0",
            description="REST service for listing and adding stocks (promotions)",
            fields=list(FIELDS),
            paths={
                "stocks": "/api/stocks",
                "add_stock": "/api/add-stock",
            },
        ),
        status.HTTP_200_OK,
    )


######################################################################
# LIST Stocks
######################################################################
@app.route("/api/stocks", methods=["GET"])
def list_stocks():
    """
    List Stocks
    Returns every stock in stored order; each field is a list of strings
    """
    app.logger.info("Request to list Stocks")
    try:
        stocks = Stock.all()
    except StorageReadError as error:
        app.logger.error("Error reading stocks file: %s", error)
        return text_response(LIST_FAILED, status.HTTP_500_INTERNAL_SERVER_ERROR)
    except FormatError as error:
        app.logger.error("Error parsing stocks file: %s", error)
        return text_response(LIST_FAILED, status.HTTP_500_INTERNAL_SERVER_ERROR)

    results = [stock.serialize() for stock in stocks]
    return jsonify(results), status.HTTP_200_OK


######################################################################
# ADD a Stock
######################################################################
@app.route("/api/add-stock", methods=["POST"])
def add_stock():
    """
    Add a Stock
    Appends the stock from the JSON body to the end of the collection.
    Only the title is required.
    """
    app.logger.info("Request to Add a Stock")
    data = request.get_json(silent=True)
    app.logger.info("Processing: %s", data)
    # DataValidationError is answered by the error handler with 400
    stock = Stock().deserialize(data)

    try:
        stock.create()
    except StorageReadError as error:
        app.logger.error("Error reading stocks file for writing: %s", error)
        return text_response(ADD_READ_FAILED, status.HTTP_500_INTERNAL_SERVER_ERROR)
    except FormatError as error:
        app.logger.error("Error parsing stocks file for writing: %s", error)
        return text_response(ADD_PARSE_FAILED, status.HTTP_500_INTERNAL_SERVER_ERROR)
    except StorageWriteError as error:
        app.logger.error("Error writing stocks file: %s", error)
        return text_response(ADD_WRITE_FAILED, status.HTTP_500_INTERNAL_SERVER_ERROR)

    return text_response(ADD_SUCCEEDED, status.HTTP_201_CREATED)


######################################################################
# Endpoint: /health (K8s liveness/readiness)
######################################################################
@app.route("/health", methods=["GET"])
def health():
    """
    K8s health check endpoint
    Returns:
        JSON: {"status": "OK"} with HTTP 200
    Notes:
        - Does not touch the stocks file so that probes stay stable
    """
    app.logger.info("Health check requested")
    return jsonify(status="OK"), status.HTTP_200_OK
