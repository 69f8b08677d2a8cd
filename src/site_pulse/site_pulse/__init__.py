"""Site Pulse package.

Hourly activity reporting for site engineers, organized by feature modules
(sessions, reports, plans) with a thin Flask controller layer over
service/repository layers.
"""
