"""Quota management.

Each credential has a monthly quota: the number of requests that can be
authorized during one billing period (calendar month). Quota set to zero
means that requests are not counted at all. Usage of all credentials is reset
to zero at midnight UTC on the first day of every month by quota scheduler
(see `runners.quota_scheduler`).
"""
