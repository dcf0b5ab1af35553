"""Shared helpers: logging, number/date formatting, file output, financial math"""
