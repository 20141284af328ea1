from ebay_search.cli import main

raise SystemExit(main())
