"""Step definitions for the Stocks UI BDD tests.

All interactions are performed via the browser (Selenium) against the page
at /. No direct API calls are made in these steps.
"""

from behave import given, when, then
from selenium.webdriver.common.by import By
from selenium.webdriver.support import expected_conditions
from selenium.webdriver.support.ui import WebDriverWait


@given("the Stocks UI is available")
def step_ui_is_available(context):
    """Navigate to the page and wait for the list to load."""
    context.browser.get(context.base_url + "/")
    title = context.browser.title or ""
    page = context.browser.page_source or ""
    assert "Акции" in title or "Акции" in page
    WebDriverWait(context.browser, context.wait_seconds).until(
        lambda driver: driver.find_element(By.ID, "stock-list-container").text != ""
    )


@then('the page title contains "{text}"')
def step_title_contains(context, text):
    """Assert that the document.title contains a specific substring."""
    assert text in (context.browser.title or "")
    # Also ensure our H1 is present for robustness
    h1 = context.browser.find_element(By.ID, "title")
    assert text in h1.text


@when('I fill in the stock form with title "{title}" and category "{category}"')
def step_fill_form(context, title, category):
    """Type the title and category into the add form."""
    for element_id, value in (("title", title), ("category", category)):
        element = context.browser.find_element(By.ID, element_id)
        element.clear()
        element.send_keys(value)


@when('I press the "{label}" button')
def step_press_button(context, label):
    """Submit the add form."""
    button = context.browser.find_element(By.ID, "add-stock-btn")
    assert label in button.text
    button.click()


@then('I should see a stock card titled "{title}"')
def step_see_card(context, title):
    """Wait until the re-rendered list shows the new card."""
    found = WebDriverWait(context.browser, context.wait_seconds).until(
        expected_conditions.text_to_be_present_in_element(
            (By.ID, "stock-list-container"), title
        )
    )
    assert found


@then("the stock form should be empty")
def step_form_is_empty(context):
    """The form is reset after a successful submission."""
    for element_id in ("img", "title", "release_date", "category", "description"):
        element = context.browser.find_element(By.ID, element_id)
        assert element.get_attribute("value") == ""
