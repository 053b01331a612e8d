#!/usr/bin/env python3
"""
Dependency checking and validation for mdpdf.
Provides platform-specific installation guidance.

MIT License - Copyright (c) 2025 Markdown to PDF Converter
"""

import importlib
import subprocess
import sys
import platform
from typing import Tuple, List, Optional
from colorama import Fore, Style

# (package name on the index, import name)
REQUIRED_PACKAGES = [
    ("playwright", "playwright"),
    ("markdown", "markdown"),
    ("PyYAML", "yaml"),
    ("colorama", "colorama"),
]


class DependencyChecker:
    """Check and report on required dependencies."""

    def __init__(self):
        """Initialize dependency checker."""
        self.system = platform.system()
        self.missing_python_packages: List[str] = []

    def check_python_package(self, package_name: str, import_name: Optional[str] = None) -> bool:
        """Check if a Python package is installed."""
        if import_name is None:
            import_name = package_name

        try:
            importlib.import_module(import_name)
            return True
        except ImportError:
            self.missing_python_packages.append(package_name)
            return False

    def check_playwright_browsers(self) -> bool:
        """Check if the Playwright Chromium browser is installed."""
        try:
            result = subprocess.run(
                [sys.executable, "-m", "playwright", "install", "--dry-run", "chromium"],
                capture_output=True,
                text=True,
                timeout=10
            )
            # If chromium is already installed, dry-run will succeed
            return "chromium" in result.stdout.lower() or result.returncode == 0
        except (OSError, subprocess.SubprocessError):
            return False

    def get_playwright_install_command(self) -> str:
        """Get platform-specific Playwright install command."""
        if self.system == "Linux":
            return f"{sys.executable} -m playwright install --with-deps chromium"
        return f"{sys.executable} -m playwright install chromium"

    def check_all(self) -> Tuple[bool, List[str]]:
        """Check all dependencies and return status and messages."""
        messages: List[str] = []
        all_ok = True

        print(f"{Fore.CYAN}Checking Python packages...{Style.RESET_ALL}")

        for package_name, import_name in REQUIRED_PACKAGES:
            if not self.check_python_package(package_name, import_name):
                all_ok = False
                messages.append(f"{Fore.RED}[MISSING]{Style.RESET_ALL} {package_name} - Run: pip install {package_name}")
            else:
                print(f"{Fore.GREEN}[OK]{Style.RESET_ALL} {package_name} is available")

        if "playwright" not in self.missing_python_packages:
            print(f"\n{Fore.CYAN}Checking browsers...{Style.RESET_ALL}")
            if not self.check_playwright_browsers():
                all_ok = False
                messages.append(f"{Fore.YELLOW}[WARNING]{Style.RESET_ALL} Playwright browsers not installed")
                messages.append(f"  Run: {self.get_playwright_install_command()}")
            else:
                print(f"{Fore.GREEN}[OK]{Style.RESET_ALL} Playwright browsers are installed")

        return all_ok, messages

    def print_summary(self) -> bool:
        """Check dependencies and print summary. Returns True if all required deps are available."""
        all_ok, messages = self.check_all()

        if messages:
            print(f"\n{Fore.YELLOW}Dependency Summary:{Style.RESET_ALL}")
            for msg in messages:
                print(f"  {msg}")
        else:
            print(f"\n{Fore.GREEN}All dependencies are available!{Style.RESET_ALL}")

        return all_ok


def check_dependencies() -> bool:
    """Convenience function to check dependencies."""
    checker = DependencyChecker()
    return checker.print_summary()
