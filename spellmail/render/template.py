"""Fixed page chrome for the reviewer document.

Flagged words are ``<mark>`` elements: white on purple on screen, underlined
in print because background colours are usually dropped by printers.
"""

HEADER = """<html>
  <head>
    <meta charset='UTF-8'>
    <style>
      body {
        line-height: 1.3;
        font-family: Georgia, 'Times New Roman', Times, serif;
      }

      mark {
        background-color: purple;
        color: white;
      }

      @media print {
        mark {
          background-color: transparent;
          color: inherit;
          text-decoration: underline;
        }
      }

      @page {
        margin: 2cm;
      }
    </style>
  </head>
  <body>
"""

FOOTER = """  </body>
</html>
"""
