"""
Test Factory to make fake objects for testing
"""

import factory
from service.models import Stock


class StockFactory(factory.Factory):
    """Creates fake stocks for testing"""

    class Meta:  # pylint: disable=too-few-public-methods
        """Maps factory to data model"""

        model = Stock

    img = factory.Faker("image_url")
    title = factory.Faker("catch_phrase")
    release_date = factory.Faker("date")
    category = factory.Faker("random_element", elements=("Электроника", "Продукты", "Одежда", "Книги"))
    description = factory.Faker("sentence")
