from gjira.main import main

raise SystemExit(main())
