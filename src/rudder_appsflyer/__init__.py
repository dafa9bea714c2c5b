"""Package initialization for rudder-appsflyer.

Maps RudderStack identify/track/screen events onto AppsFlyer event names and
parameters. The stable entry points are `rudder_appsflyer.mapper` (pure
mapping functions) and `rudder_appsflyer.integration` (the plugin that drives
a sink); `python -m rudder_appsflyer` exposes the replay CLI.
"""

__all__ = []
