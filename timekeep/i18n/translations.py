# -*- coding: utf-8 -*-
"""
Translation dictionaries for German and English.

This module contains all translatable strings for the Timekeep application.
"""

TRANSLATIONS = {
    "en": {
        # Weekdays
        "weekday.sunday": "Sunday",
        "weekday.monday": "Monday",
        "weekday.tuesday": "Tuesday",
        "weekday.wednesday": "Wednesday",
        "weekday.thursday": "Thursday",
        "weekday.friday": "Friday",
        "weekday.saturday": "Saturday",

        # Relative days
        "day.yesterday": "Yesterday",
        "day.today": "Today",
        "day.tomorrow": "Tomorrow",

        # Dialogs
        "dialog.confirm": "Confirm",
        "dialog.progress": "Please wait",

        # Tracker
        "tracker.tick": "{task}: {elapsed}",
    },
    "de": {
        # Weekdays
        "weekday.sunday": "Sonntag",
        "weekday.monday": "Montag",
        "weekday.tuesday": "Dienstag",
        "weekday.wednesday": "Mittwoch",
        "weekday.thursday": "Donnerstag",
        "weekday.friday": "Freitag",
        "weekday.saturday": "Samstag",

        # Relative days
        "day.yesterday": "Gestern",
        "day.today": "Heute",
        "day.tomorrow": "Morgen",

        # Dialogs
        "dialog.confirm": "Bestätigen",
        "dialog.progress": "Bitte warten",

        # Tracker
        "tracker.tick": "{task}: {elapsed}",
    }
}
