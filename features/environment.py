"""Behave environment hooks for the Stocks UI BDD tests.

A headless Chrome/Chromium is started once for the whole run and pointed at
a running Stocks service.

Settings (environment variable, then `behave -D NAME=...`, then default):
  BASE_URL      http://localhost:3000
  WAIT_SECONDS  10
  CHROME_BIN    auto-detected Chrome/Chromium binary
  CHROMEDRIVER  auto-detected chromedriver; Selenium Manager otherwise
"""

from __future__ import annotations

import os
import shutil
from typing import Optional

from selenium import webdriver
from selenium.webdriver.chrome.options import Options as ChromeOptions
from selenium.webdriver.chrome.service import Service as ChromeService

BROWSER_CANDIDATES = ("chromium", "chromium-browser", "google-chrome", "chrome")
DRIVER_CANDIDATES = ("/usr/bin/chromedriver", "/usr/lib/chromium/chromedriver")


def _setting(context, name: str, default: str) -> str:
    return os.getenv(name) or context.config.userdata.get(name) or default


def _find_executable(env_name: str, paths, names) -> Optional[str]:
    """Return the first existing executable from env, fixed paths or PATH."""
    env_path = os.getenv(env_name)
    if env_path and os.path.exists(env_path):
        return env_path
    for path in paths:
        if os.path.exists(path):
            return path
    for name in names:
        found = shutil.which(name)
        if found:
            return found
    return None


def before_all(context):
    """Start a headless browser and remember the base URL."""
    context.base_url = _setting(context, "BASE_URL", "http://localhost:3000").rstrip("/")
    context.wait_seconds = int(_setting(context, "WAIT_SECONDS", "10"))

    options = ChromeOptions()
    options.add_argument("--headless=new")
    options.add_argument("--no-sandbox")
    options.add_argument("--disable-dev-shm-usage")
    options.add_argument("--lang=ru")

    chrome_bin = _find_executable(
        "CHROME_BIN", ("/usr/bin/chromium", "/usr/bin/google-chrome"), BROWSER_CANDIDATES
    )
    if chrome_bin:
        options.binary_location = chrome_bin

    driver_path = _find_executable("CHROMEDRIVER", DRIVER_CANDIDATES, ("chromedriver",))
    try:
        if driver_path:
            service = ChromeService(executable_path=driver_path)
            context.browser = webdriver.Chrome(service=service, options=options)
        else:
            # Selenium Manager fetches a matching driver
            context.browser = webdriver.Chrome(options=options)
    except Exception as exc:  # pragma: no cover
        raise RuntimeError(
            "Cannot start headless Chrome/Chromium. Install chromium and "
            "chromium-driver, or set CHROME_BIN / CHROMEDRIVER. "
            f"Original error: {type(exc).__name__}: {exc}"
        ) from exc

    context.browser.set_window_size(1400, 1000)


def after_all(context):
    """Shut down the browser if it was started."""
    browser = getattr(context, "browser", None)
    if browser:
        browser.quit()
