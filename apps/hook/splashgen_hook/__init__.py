"""Cordova hook and command line front end for splashgen."""
