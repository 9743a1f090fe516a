# This file marks the repositories package for API data-access modules.
# It exists so routers can depend on one repository per entity instead of raw SQL.
# Repository modules isolate query construction from transport concerns.
