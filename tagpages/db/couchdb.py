import pycouchdb

from tagpages.services.content_parser import ContentParser
from tagpages.settings import settings


def get_couch():
    """
    Open the CouchDB database that holds the blog documents, plus a
    ContentParser that stitches their leaf chunks back into markdown.
    Only used when CONTENT_SOURCE is "couchdb".
    """
    database = pycouchdb.Server(settings.couchdb_url).database(settings.COUCHDB_DATABASE)
    return database, ContentParser(database)
